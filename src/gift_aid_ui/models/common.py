"""
Common state models for the Gift Aid Submission UI.

This module defines the small value objects shared between the review
engine, the services and the UI state:

- Filter criteria and the wire request built from them
- Filter picker options and the resolved user scope
- Pagination state
- Notices (toast-style messages surfaced to the user)

All models include to_dict/from_dict methods so the UI layer can keep the
session as one JSON-compatible value between events.
"""

from dataclasses import dataclass, field, replace
from datetime import date
from typing import Any

from gift_aid_ui.utils import is_blank, parse_date

NONE_OPTION_LABEL = "--None--"


@dataclass(frozen=True, slots=True)
class FilterCriteria:
    """
    Filter values used to query transactions.

    Every field is optional; None means "no constraint". Dates are
    inclusive calendar days.
    """

    start_date: date | None = None
    end_date: date | None = None
    product_id: str | None = None
    gift_aid_status: str | None = None
    company_id: str | None = None

    @property
    def has_date_range(self) -> bool:
        """True when both dates are present."""
        return self.start_date is not None and self.end_date is not None

    @property
    def is_date_range_valid(self) -> bool:
        """False only when both dates are present and start is after end."""
        return not self.has_date_range or self.start_date <= self.end_date

    def with_changes(self, **changes: Any) -> "FilterCriteria":
        return replace(self, **changes)

    def to_request(self) -> dict:
        """Build the remote query request; blank fields are sent as None."""
        return {
            "startDate": self.start_date.isoformat() if self.start_date else None,
            "endDate": self.end_date.isoformat() if self.end_date else None,
            "productId": self.product_id or None,
            "giftAidStatus": self.gift_aid_status or None,
            "companyId": self.company_id or None,
        }

    def to_dict(self) -> dict:
        return {
            "start_date": self.start_date.isoformat() if self.start_date else None,
            "end_date": self.end_date.isoformat() if self.end_date else None,
            "product_id": self.product_id,
            "gift_aid_status": self.gift_aid_status,
            "company_id": self.company_id,
        }

    @classmethod
    def from_dict(cls, data: dict | None) -> "FilterCriteria":
        if not data:
            return cls()
        return cls(
            start_date=parse_date(data.get("start_date")),
            end_date=parse_date(data.get("end_date")),
            product_id=_optional(data.get("product_id")),
            gift_aid_status=_optional(data.get("gift_aid_status")),
            company_id=_optional(data.get("company_id")),
        )


@dataclass(frozen=True, slots=True)
class FilterOption:
    """A single picker entry."""

    label: str
    value: str

    def to_dict(self) -> dict:
        return {"label": self.label, "value": self.value}

    @classmethod
    def from_dict(cls, data: dict) -> "FilterOption":
        return cls(label=data.get("label", ""), value=data.get("value", ""))


NONE_OPTION = FilterOption(NONE_OPTION_LABEL, "")


@dataclass
class FilterOptions:
    """Options for the product, status and company pickers."""

    products: list[FilterOption] = field(default_factory=list)
    statuses: list[FilterOption] = field(default_factory=list)
    companies: list[FilterOption] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "products": [o.to_dict() for o in self.products],
            "statuses": [o.to_dict() for o in self.statuses],
            "companies": [o.to_dict() for o in self.companies],
        }

    @classmethod
    def from_dict(cls, data: dict | None) -> "FilterOptions":
        if not data:
            return cls()
        return cls(
            products=[FilterOption.from_dict(o) for o in data.get("products", [])],
            statuses=[FilterOption.from_dict(o) for o in data.get("statuses", [])],
            companies=[FilterOption.from_dict(o) for o in data.get("companies", [])],
        )


@dataclass(frozen=True, slots=True)
class UserScope:
    """The organizational scope (company) of the calling user."""

    scope_id: str
    scope_label: str = ""

    def to_dict(self) -> dict:
        return {"scope_id": self.scope_id, "scope_label": self.scope_label}

    @classmethod
    def from_dict(cls, data: dict | None) -> "UserScope | None":
        if not data or not data.get("scope_id"):
            return None
        return cls(scope_id=data["scope_id"], scope_label=data.get("scope_label", ""))


@dataclass
class PaginationState:
    """
    Snapshot of the page window.

    Attributes:
        page: Current page number (1-indexed).
        page_size: Number of records per page.
        total: Total number of loaded records.
    """

    page: int = 1
    page_size: int = 10
    total: int = 0

    @property
    def total_pages(self) -> int:
        """Page count, never less than 1."""
        return max(1, -(-self.total // self.page_size))

    @property
    def is_prev_disabled(self) -> bool:
        return self.page <= 1

    @property
    def is_next_disabled(self) -> bool:
        return self.page >= self.total_pages


@dataclass(frozen=True, slots=True)
class Notice:
    """
    A message to surface to the user (rendered as a toast).

    Attributes:
        level: One of "info", "success", "warning", "error".
        title: Short heading.
        message: Body text.
    """

    level: str
    title: str
    message: str

    def to_dict(self) -> dict:
        return {"level": self.level, "title": self.title, "message": self.message}

    @classmethod
    def info(cls, message: str, title: str = "Info") -> "Notice":
        return cls("info", title, message)

    @classmethod
    def success(cls, message: str, title: str = "Success") -> "Notice":
        return cls("success", title, message)

    @classmethod
    def warning(cls, message: str, title: str = "Warning") -> "Notice":
        return cls("warning", title, message)

    @classmethod
    def error(cls, message: str, title: str = "Error") -> "Notice":
        return cls("error", title, message)


def _optional(value: Any) -> str | None:
    return None if is_blank(value) else str(value)
