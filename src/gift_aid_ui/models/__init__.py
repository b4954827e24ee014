"""
Data models and serialization helpers for the Gift Aid Submission UI.

This package provides:
- Transaction record and column metadata
- Filter criteria, picker options and user scope
- Pagination state and user notices

All models use Python dataclasses for type safety and IDE support.
"""

from gift_aid_ui.models.common import (
    NONE_OPTION,
    FilterCriteria,
    FilterOption,
    FilterOptions,
    Notice,
    PaginationState,
    UserScope,
)
from gift_aid_ui.models.transaction import (
    COLUMNS,
    Column,
    Transaction,
    deserialize_transaction,
    serialize_transaction,
)

__all__ = [
    "COLUMNS",
    "Column",
    "FilterCriteria",
    "FilterOption",
    "FilterOptions",
    "NONE_OPTION",
    "Notice",
    "PaginationState",
    "Transaction",
    "UserScope",
    "deserialize_transaction",
    "serialize_transaction",
]
