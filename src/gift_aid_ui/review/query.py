"""
Filter-to-query translation and result normalization.

QueryCoordinator turns filter criteria into a remote request, normalizes
the raw rows it gets back and swaps them into the record store. A
successful response always:

1. replaces the record store contents,
2. resets pagination to page 1,
3. clears the selection (ids may now live on different pages).

A failed request changes nothing.

Responses are applied in whatever order they arrive: an asynchronous
caller may call apply_result() directly and the last call wins. Selection
reconciliation is keyed by record id, so a late response cannot corrupt it.
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Iterable, Mapping

from benedict import benedict

from gift_aid_ui import settings
from gift_aid_ui.errors import DataShapeError, TransportError
from gift_aid_ui.lib import logs, objects
from gift_aid_ui.models.common import FilterCriteria, UserScope
from gift_aid_ui.models.transaction import Transaction
from gift_aid_ui.review.filters import FilterState
from gift_aid_ui.review.paginator import Paginator
from gift_aid_ui.review.records import RecordStore
from gift_aid_ui.review.selection import SelectionRegistry
from gift_aid_ui.services.transaction_service import TransactionService
from gift_aid_ui.utils import INVALID_AMOUNT, format_amount

LOG = logs.logger(__file__)

# Transaction field -> raw row keypath
RAW_FIELD_PATHS: Mapping[str, str] = {
    "invoice_date": "invoiceDate",
    "customer_reference": "customerReference",
    "sales_invoice_header_name": "salesInvoiceHeaderName",
    "company_name": "companyName",
    "account_name": "accountName",
    "contact_first_name": "contactFirstName",
    "contact_last_name": "contactLastName",
    "contact_postal_code": "contactPostalCode",
    "product_name": "productName",
    "nominal_code": "nominalCode",
    "sales_vat": "salesVAT",
    "analysis1": "analysis1",
    "analysis2": "analysis2",
    "analysis6": "analysis6",
    "gift_aid_status": "giftAidStatus",
}
RAW_ID_PATHS = ("Id", "id")
RAW_AMOUNT_PATH = "paidAmount"


def _text(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def _row_view(raw: Mapping[str, Any]) -> benedict:
    # Flat keys containing the keypath separator cannot be addressed; drop them
    return benedict({k: v for k, v in raw.items() if "." not in str(k)})


def normalize_row(
    raw: Mapping[str, Any],
    field_paths: Mapping[str, str] = RAW_FIELD_PATHS,
) -> Transaction:
    """
    Convert one raw backend row into a Transaction.

    Paths may be dotted keypaths into nested values ("contact.firstName").
    The paid amount is reformatted to a two-decimal string; a value that
    cannot be parsed, or a missing amount key, yields INVALID_AMOUNT.

    Raises:
        DataShapeError: If the row has no identifier.
    """
    b = _row_view(raw)
    row_id = next((b[path] for path in RAW_ID_PATHS if b.get(path)), None)
    if row_id is None:
        raise DataShapeError("Row has no identifier")

    if RAW_AMOUNT_PATH in b:
        paid_amount = format_amount(b[RAW_AMOUNT_PATH])
        if paid_amount == INVALID_AMOUNT:
            LOG.warning(
                "Invalid paid amount for %s: %r", row_id, b[RAW_AMOUNT_PATH]
            )
    else:
        paid_amount = INVALID_AMOUNT

    return Transaction(
        id=str(row_id),
        paid_amount=paid_amount,
        **{name: _text(b.get(path)) for name, path in field_paths.items()},
    )


def normalize_rows(raw_rows: Iterable[Mapping[str, Any]]) -> list[Transaction]:
    """Normalize a batch; a malformed row is skipped, never fatal."""
    records = []
    for index, raw in enumerate(raw_rows):
        try:
            records.append(normalize_row(raw))
        except (AttributeError, TypeError, ValueError) as exc:
            LOG.warning("Skipping row %d (%s): %s", index, exc, raw)
    return records


@dataclass(frozen=True)
class ScopeResolution:
    """
    Outcome of resolving the calling user's default scope.

    Attributes:
        scope: The resolved scope, or None.
        fell_back: True when no scope could be resolved and the default
            load runs without a scope constraint.
    """

    scope: UserScope | None
    fell_back: bool


class QueryCoordinator:
    """Issues transaction queries and applies their results."""

    def __init__(
        self,
        service: TransactionService,
        store: RecordStore,
        filters: FilterState,
        paginator: Paginator,
        selection: SelectionRegistry,
        default_status: str = settings.DEFAULT_STATUS,
    ) -> None:
        self._service = service
        self._store = store
        self._filters = filters
        self._paginator = paginator
        self._selection = selection
        self.default_status = default_status

    def resolve_default_scope(self) -> ScopeResolution:
        """Resolve the user's scope; any failure falls back to no scope."""
        try:
            scope = self._service.resolve_current_user_scope()
        except Exception:
            LOG.warning("Error fetching current user company", exc_info=True)
            scope = None
        if scope is None or not scope.scope_id:
            LOG.warning("No default company for user; loading without company filter")
            return ScopeResolution(scope=None, fell_back=True)
        LOG.info("Default company set: %s (%s)", scope.scope_label, scope.scope_id)
        return ScopeResolution(scope=scope, fell_back=False)

    def default_criteria(self, scope: UserScope | None = None) -> FilterCriteria:
        return FilterCriteria(
            gift_aid_status=self.default_status,
            company_id=scope.scope_id if scope else None,
        )

    def load_default(self, scope: UserScope | None = None) -> list[Transaction]:
        """Load with the default status and, when known, the user's scope."""
        return self.run(self.default_criteria(scope))

    def apply_filters(self) -> list[Transaction]:
        """
        Query with the current filter values.

        Raises:
            ValidationError: If the date range is inverted; nothing is sent.
            TransportError: If the query fails.
        """
        return self.run(self._filters.validate())

    def load_base(self) -> list[Transaction]:
        """Query without any constraint."""
        return self.run(FilterCriteria())

    def refresh(self) -> list[Transaction]:
        """Re-run the filtered query when a full date range is set, else the base query."""
        if self._filters.has_date_range:
            return self.apply_filters()
        return self.load_base()

    def run(self, criteria: FilterCriteria) -> list[Transaction]:
        """
        Fetch with the given criteria and apply the result.

        Raises:
            TransportError: If the service call fails. State is untouched.
        """
        request = criteria.to_request()
        LOG.info("Fetching transactions: %s", objects.to_json(request))
        try:
            raw_rows = self._service.fetch_transactions(request)
        except TransportError:
            LOG.error("Error fetching transactions", exc_info=True)
            raise
        except Exception as exc:
            LOG.error("Error fetching transactions", exc_info=True)
            raise TransportError("Failed to load transactions", operation="query") from exc
        return self.apply_result(raw_rows)

    def apply_result(self, raw_rows: Iterable[Mapping[str, Any]]) -> list[Transaction]:
        """Normalize a response and make it the current result set."""
        records = normalize_rows(raw_rows)
        self._store.replace(records)
        self._paginator.set_source(self._store.records)
        self._selection.clear()
        LOG.info(
            "Transactions loaded - count:%s pages:%s",
            len(records),
            self._paginator.total_pages,
        )
        return records
