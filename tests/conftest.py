from typing import Any, Callable, Mapping, Sequence

import pytest

from gift_aid_ui.models.common import FilterOption, UserScope
from gift_aid_ui.services.transaction_service import TransactionService


def make_raw_row(index: int, **overrides: Any) -> dict:
    """Raw backend row with id T001, T002, ..."""
    row = {
        "Id": f"T{index:03d}",
        "invoiceDate": f"2025-01-{(index - 1) % 28 + 1:02d}",
        "customerReference": f"CUST-{index}",
        "salesInvoiceHeaderName": f"SIH-{index}",
        "companyName": "Northfield Trust",
        "accountName": f"Account {index}",
        "contactFirstName": "Ada",
        "contactLastName": "Lovelace",
        "contactPostalCode": "NW1 2DB",
        "productName": "Regular Donation",
        "nominalCode": "4000",
        "salesVAT": "0.00",
        "paidAmount": 10 + index,
        "analysis1": "GA",
        "analysis2": None,
        "analysis6": None,
        "giftAidStatus": "Non-Submitted",
    }
    row.update(overrides)
    return row


def make_raw_rows(count: int, start: int = 1) -> list[dict]:
    return [make_raw_row(index) for index in range(start, start + count)]


class FakeTransactionService(TransactionService):
    """Records every call; failures are switched on per operation."""

    def __init__(
        self,
        rows: Sequence[Mapping[str, Any]] = (),
        scope: UserScope | None = None,
    ) -> None:
        self.rows = [dict(row) for row in rows]
        self.scope = scope
        self.requests: list[dict] = []
        self.submissions: list[list[str]] = []
        self.fail_fetch = False
        self.fail_submit = False
        self.fail_scope = False
        self.fail_options: set[str] = set()
        self.on_fetch: Callable[[], None] | None = None

    def fetch_transactions(self, request: Mapping[str, Any]) -> list[dict]:
        self.requests.append(dict(request))
        if self.on_fetch:
            self.on_fetch()
        if self.fail_fetch:
            raise ConnectionError("backend unavailable")
        return [dict(row) for row in self.rows]

    def submit_selection(self, ids: Sequence[str]) -> dict:
        self.submissions.append(list(ids))
        if self.fail_submit:
            raise ConnectionError("backend unavailable")
        return {"submitted": len(ids)}

    def list_product_options(self) -> list[FilterOption]:
        return self._options("product", [FilterOption("Regular Donation", "PRD-1")])

    def list_status_options(self) -> list[FilterOption]:
        return self._options(
            "status",
            [
                FilterOption("Non-Submitted", "Non-Submitted"),
                FilterOption("Submitted", "Submitted"),
            ],
        )

    def list_company_options(self) -> list[FilterOption]:
        return self._options("company", [FilterOption("Northfield Trust", "CMP-1")])

    def resolve_current_user_scope(self) -> UserScope | None:
        if self.fail_scope:
            raise RuntimeError("no user context")
        return self.scope

    def _options(self, kind: str, options: list[FilterOption]) -> list[FilterOption]:
        if kind in self.fail_options:
            raise ConnectionError(f"{kind} options unavailable")
        return options


@pytest.fixture
def raw_row() -> Callable[..., dict]:
    return make_raw_row


@pytest.fixture
def raw_rows() -> Callable[..., list[dict]]:
    return make_raw_rows


@pytest.fixture
def service() -> FakeTransactionService:
    """Fake service holding 25 rows (T001..T025)."""
    return FakeTransactionService(rows=make_raw_rows(25))
