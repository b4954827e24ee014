"""
Environment-driven configuration for the Gift Aid Submission UI.

All values are read once at import time.
"""

import os


def env_int(name: str, default: int) -> int:
    """Return an integer environment value, falling back to default when unset or blank."""
    value = os.getenv(name, "").strip()
    return int(value) if value else default


# Pagination
PAGE_SIZE = env_int("GIFT_AID_PAGE_SIZE", 10)

# Service selection: "demo" (in-memory) or "impl" (Databricks)
SERVICE_KIND = os.getenv("GIFT_AID_SERVICE", "demo").lower()

# Gift Aid status values
DEFAULT_STATUS = os.getenv("GIFT_AID_DEFAULT_STATUS", "Non-Submitted")
SUBMITTED_STATUS = os.getenv("GIFT_AID_SUBMITTED_STATUS", "Submitted")

# Live service tables
TRANSACTION_TABLE = os.getenv("GIFT_AID_TRANSACTION_TABLE")
USER_COMPANY_TABLE = os.getenv("GIFT_AID_USER_COMPANY_TABLE")
OPTIONS_CACHE_TTL = env_int("GIFT_AID_OPTIONS_CACHE_TTL", 60 * 5)

# Export
EXPORT_PREFIX = os.getenv("GIFT_AID_EXPORT_PREFIX", "Gift_Aid_Sales_Invoice_Transactions")

# Server
APP_PORT = env_int("GIFT_AID_APP_PORT", env_int("DATABRICKS_APP_PORT", 8000))
