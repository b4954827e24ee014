"""
Transaction record model, column metadata and serialization helpers.

A Transaction is one Sales Invoice Transaction row as displayed, selected
and exported. Records are immutable once fetched: every query replaces the
loaded set wholesale.

COLUMNS is the single ordered column declaration shared by the table
component and the CSV export header.
"""

from dataclasses import asdict, dataclass, fields
from typing import Any, Mapping, Sequence

from gift_aid_ui.utils import INVALID_AMOUNT


@dataclass(frozen=True, slots=True)
class Column:
    """Display metadata for one transaction column."""

    label: str
    field_name: str
    type: str = "text"
    initial_width: int = 150


COLUMNS: Sequence[Column] = (
    Column("Invoice Date", "invoice_date", type="date"),
    Column("Customer Reference", "customer_reference"),
    Column("Sales Header", "sales_invoice_header_name"),
    Column("Company", "company_name"),
    Column("Account Name", "account_name"),
    Column("First Name", "contact_first_name"),
    Column("Last Name", "contact_last_name"),
    Column("Postal Code", "contact_postal_code"),
    Column("Product Name", "product_name"),
    Column("Nominal Code", "nominal_code"),
    Column("Sales VAT", "sales_vat"),
    Column("Paid Amount", "paid_amount"),
    Column("Analysis 1", "analysis1"),
    Column("Analysis 2", "analysis2"),
    Column("Analysis 6", "analysis6"),
)


@dataclass(frozen=True, slots=True)
class Transaction:
    """A normalized Sales Invoice Transaction."""

    id: str
    invoice_date: str | None = None
    customer_reference: str | None = None
    sales_invoice_header_name: str | None = None
    company_name: str | None = None
    account_name: str | None = None
    contact_first_name: str | None = None
    contact_last_name: str | None = None
    contact_postal_code: str | None = None
    product_name: str | None = None
    nominal_code: str | None = None
    sales_vat: str | None = None
    paid_amount: str = INVALID_AMOUNT
    analysis1: str | None = None
    analysis2: str | None = None
    analysis6: str | None = None
    gift_aid_status: str | None = None

    @property
    def has_valid_amount(self) -> bool:
        """Return False when the source amount could not be parsed."""
        return self.paid_amount != INVALID_AMOUNT

    def value(self, field_name: str) -> Any:
        """Return the value of a column by field name."""
        return getattr(self, field_name)


_FIELD_NAMES = frozenset(f.name for f in fields(Transaction))


def serialize_transaction(transaction: Transaction) -> dict:
    """Convert a Transaction into a JSON serializable dictionary."""
    return asdict(transaction)


def deserialize_transaction(payload: Mapping[str, Any]) -> Transaction:
    """
    Convert a dictionary produced by serialize_transaction back into a Transaction.

    Unknown keys are ignored so older snapshots stay loadable.
    """
    return Transaction(**{k: v for k, v in payload.items() if k in _FIELD_NAMES})
