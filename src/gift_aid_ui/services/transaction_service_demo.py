"""
Demo implementation of TransactionService using static in-memory data.

This service is useful for:
- Local development without Databricks access
- Testing UI components with realistic data
- Demonstrating the submission workflow end to end

Submissions mutate the service's own copy of the fixture rows, so a
submitted transaction drops out of the "Non-Submitted" view on reload.
"""

import copy
import time
from typing import Any, Mapping, Sequence

from gift_aid_ui import settings
from gift_aid_ui.data.demo_transactions import (
    DEMO_COMPANIES,
    DEMO_PRODUCTS,
    DEMO_TRANSACTIONS,
)
from gift_aid_ui.lib import logs
from gift_aid_ui.models.common import FilterOption, UserScope
from gift_aid_ui.services.transaction_service import TransactionService
from gift_aid_ui.utils import parse_date

LOG = logs.logger(__file__)


class DemoTransactionService(TransactionService):
    """
    In-memory transaction service backed by static demo data.

    Attributes:
        latency: Seconds to sleep before each remote-style call.
    """

    def __init__(
        self,
        rows: Sequence[Mapping[str, Any]] | None = None,
        scope: UserScope | None = None,
        latency: float = 0.0,
    ) -> None:
        """
        Initialize with transaction rows.

        Args:
            rows: Custom raw rows, or None to use DEMO_TRANSACTIONS.
            scope: Scope reported for the current user (None means unknown).
            latency: Simulated network delay in seconds.
        """
        source = DEMO_TRANSACTIONS if rows is None else rows
        self._rows: list[dict] = [copy.deepcopy(dict(row)) for row in source]
        self._scope = scope
        self.latency = latency

    def fetch_transactions(self, request: Mapping[str, Any]) -> list[dict]:
        """Return copies of the rows matching every non-empty request field."""
        self._simulate_latency()
        start = parse_date(request.get("startDate"))
        end = parse_date(request.get("endDate"))
        equals = {
            "productId": request.get("productId"),
            "giftAidStatus": request.get("giftAidStatus"),
            "companyId": request.get("companyId"),
        }

        matched = []
        for row in self._rows:
            invoice_date = parse_date(row.get("invoiceDate"))
            if start and (invoice_date is None or invoice_date < start):
                continue
            if end and (invoice_date is None or invoice_date > end):
                continue
            if any(value and row.get(key) != value for key, value in equals.items()):
                continue
            matched.append(copy.deepcopy(row))
        matched.sort(key=lambda row: (row.get("invoiceDate") or "", row.get("Id") or ""))
        return matched

    def submit_selection(self, ids: Sequence[str]) -> dict:
        self._simulate_latency()
        by_id = {row.get("Id"): row for row in self._rows}
        unknown = [row_id for row_id in ids if row_id not in by_id]
        if unknown:
            raise ValueError(f"Unknown transaction ids: {', '.join(unknown)}")
        for row_id in ids:
            by_id[row_id]["giftAidStatus"] = settings.SUBMITTED_STATUS
        LOG.info("Demo submission of %d transactions", len(ids))
        return {"submitted": len(ids)}

    def list_product_options(self) -> list[FilterOption]:
        return [FilterOption(label=p["Name"], value=p["Id"]) for p in DEMO_PRODUCTS]

    def list_status_options(self) -> list[FilterOption]:
        return [
            FilterOption(label=status, value=status)
            for status in (settings.DEFAULT_STATUS, settings.SUBMITTED_STATUS)
        ]

    def list_company_options(self) -> list[FilterOption]:
        return [FilterOption(label=c["Name"], value=c["Id"]) for c in DEMO_COMPANIES]

    def resolve_current_user_scope(self) -> UserScope | None:
        return self._scope

    def _simulate_latency(self) -> None:
        if self.latency > 0:
            time.sleep(self.latency)
