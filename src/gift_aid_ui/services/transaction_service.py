"""
Abstract base class defining the transaction data access contract.

All transaction service implementations must extend TransactionService.
Scope resolution has a default implementation that reports no scope.

Implementations:
- DemoTransactionService: Static in-memory data for development/testing
- TransactionServiceImpl: Spark queries against Databricks tables
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Sequence

from gift_aid_ui.models.common import FilterOption, UserScope


class TransactionService(ABC):
    """
    Abstract base class for transaction data access.

    Rows are returned raw, keyed the way the backend names them
    (camel-case, e.g. "invoiceDate", "paidAmount"); normalization is the
    caller's job.
    """

    @abstractmethod
    def fetch_transactions(self, request: Mapping[str, Any]) -> list[dict]:
        """
        Return every transaction matching the request.

        Args:
            request: Mapping with startDate, endDate ('YYYY-MM-DD' or None),
                productId, giftAidStatus and companyId (None means no
                constraint).
        """

    @abstractmethod
    def submit_selection(self, ids: Sequence[str]) -> Any:
        """
        Mark the given transactions as submitted for Gift Aid.

        Raises:
            ValueError: If any id is unknown.
        """

    @abstractmethod
    def list_product_options(self) -> list[FilterOption]:
        """Return the product picker options."""

    @abstractmethod
    def list_status_options(self) -> list[FilterOption]:
        """Return the Gift Aid status picker options."""

    @abstractmethod
    def list_company_options(self) -> list[FilterOption]:
        """Return the company picker options."""

    def resolve_current_user_scope(self) -> UserScope | None:
        """
        Return the calling user's company, if one can be determined.

        Default implementation returns None (no scope constraint).
        """
        return None
