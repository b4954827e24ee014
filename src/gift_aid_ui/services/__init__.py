"""
Service factory for the Gift Aid Submission UI.

This module provides the get_transaction_service() factory function that
returns the appropriate TransactionService implementation.

Available Implementations:
- demo: In-memory service with static transaction data (no Databricks required)
- impl: Spark-backed service (requires Databricks)

The service is cached at the module level, so the same instance is reused
across all requests. Configure via the GIFT_AID_SERVICE environment variable.
"""

from functools import cache
from typing import Callable, Dict

from gift_aid_ui import settings
from gift_aid_ui.lib import logs
from gift_aid_ui.services.transaction_service import TransactionService
from gift_aid_ui.services.transaction_service_demo import DemoTransactionService

LOG = logs.logger(__file__)


def _impl() -> TransactionService:
    # Spark and the Databricks SDK load only when the live service is used
    from gift_aid_ui.services.transaction_service_impl import TransactionServiceImpl

    return TransactionServiceImpl()


_SERVICE_REGISTRY: Dict[str, Callable[[], TransactionService]] = {
    "demo": lambda: DemoTransactionService(),
    "impl": _impl,
}


@cache
def get_transaction_service(kind: str | None = None) -> TransactionService:
    """Return the configured transaction service implementation."""
    resolved_kind = (kind or settings.SERVICE_KIND).lower()
    LOG.info("get_transaction_service - kind:%s resolved_kind:%s", kind, resolved_kind)
    try:
        factory = _SERVICE_REGISTRY[resolved_kind]
    except KeyError as exc:
        msg = f"Unknown transaction service kind: {resolved_kind}"
        raise ValueError(msg) from exc
    return factory()


__all__ = ["DemoTransactionService", "TransactionService", "get_transaction_service"]
