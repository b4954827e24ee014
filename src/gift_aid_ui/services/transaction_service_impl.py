"""
Spark-backed implementation of TransactionService for Databricks.

This module provides the production transaction service that:
- Reads Sales Invoice Transactions from a Unity Catalog table via Spark
- Marks submitted transactions with a single UPDATE statement
- Caches filter picker options to disk with a TTL
- Resolves the current user's company from a user/company mapping table

Expected transaction table columns (snake_case): id, invoice_date,
customer_reference, sales_invoice_header_name, company_id, company_name,
account_name, contact_first_name, contact_last_name, contact_postal_code,
product_id, product_name, nominal_code, sales_vat, paid_amount, analysis1,
analysis2, analysis6, gift_aid_status, gift_aid_submitted_at.

Rows are returned with the camel-case keys the review engine normalizes.
"""

import re
from typing import Any, Mapping, Sequence

from pyspark.sql import functions as F
from pyspark.sql.dataframe import DataFrame

from gift_aid_ui import settings
from gift_aid_ui.lib import caches, clients, logs, objects, paths
from gift_aid_ui.models.common import FilterOption, UserScope
from gift_aid_ui.services.transaction_service import TransactionService
from gift_aid_ui.utils import end_of_day, parse_date, start_of_day

LOG = logs.logger(__file__)

# Table column -> raw row key
_COLUMN_ALIASES: Mapping[str, str] = {
    "id": "Id",
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
    "paid_amount": "paidAmount",
    "analysis1": "analysis1",
    "analysis2": "analysis2",
    "analysis6": "analysis6",
    "gift_aid_status": "giftAidStatus",
}

# Request key -> table column, for exact-match filters
_EQUALITY_FILTERS: Mapping[str, str] = {
    "productId": "product_id",
    "giftAidStatus": "gift_aid_status",
    "companyId": "company_id",
}

_ID_PATTERN = re.compile(r"[A-Za-z0-9_-]+")


def submission_statement(table_name: str, ids: Sequence[str]) -> tuple[str, dict]:
    """Return the UPDATE marking ids as submitted, with every value bound as a parameter."""
    statement = (
        f"UPDATE {table_name} "
        "SET gift_aid_status = :status, gift_aid_submitted_at = current_timestamp() "
        "WHERE array_contains(:ids, id)"
    )
    return statement, {"status": settings.SUBMITTED_STATUS, "ids": list(ids)}


class TransactionServiceImpl(TransactionService):
    """
    Production transaction service using Databricks Spark.

    Required Environment Variables:
        GIFT_AID_TRANSACTION_TABLE: Fully qualified table name (catalog.schema.table)

    Optional Environment Variables:
        GIFT_AID_USER_COMPANY_TABLE: Table mapping user_name to company_id/company_name
        GIFT_AID_OPTIONS_CACHE_TTL: Filter option cache lifetime in seconds

    Attributes:
        table_name: Unity Catalog table containing transactions.
    """

    _DISK_CACHE = caches.DiskCache(
        paths.cache_dir("filter_options"), default_expire=settings.OPTIONS_CACHE_TTL
    )

    def __init__(self, table_name: str | None = None) -> None:
        """
        Raises:
            AssertionError: If no transaction table is configured.
        """
        self.table_name = table_name or settings.TRANSACTION_TABLE
        assert self.table_name, "GIFT_AID_TRANSACTION_TABLE is not set"

    def fetch_transactions(self, request: Mapping[str, Any]) -> list[dict]:
        df = self._apply_filter(clients.spark().read.table(self.table_name), request)
        rows = (
            df.orderBy(F.col("invoice_date"), F.col("id"))
            .select(*[F.col(c).alias(a) for c, a in _COLUMN_ALIASES.items()])
            .collect()
        )
        LOG.info("Fetched %d transactions from %s", len(rows), self.table_name)
        return [row.asDict(recursive=True) for row in rows]

    def _apply_filter(self, df: DataFrame, request: Mapping[str, Any]) -> DataFrame:
        """
        Apply request constraints; missing values leave the column unconstrained.

        Dates bound the whole calendar day, so the range is inclusive even
        when invoice_date is stored as a timestamp.
        """
        start = parse_date(request.get("startDate"))
        end = parse_date(request.get("endDate"))
        if start:
            df = df.filter(F.col("invoice_date") >= F.lit(start_of_day(start)))
        if end:
            df = df.filter(F.col("invoice_date") <= F.lit(end_of_day(end)))
        for key, column in _EQUALITY_FILTERS.items():
            value = request.get(key)
            if value:
                df = df.filter(F.col(column) == F.lit(value))
        return df

    def submit_selection(self, ids: Sequence[str]) -> dict:
        """
        Mark every id as submitted.

        All ids are checked for existence first so a bad id rejects the
        whole submission instead of updating part of it.
        """
        unique_ids = list(dict.fromkeys(ids))
        if not unique_ids:
            raise ValueError("No transaction ids to submit")
        malformed = [i for i in unique_ids if not _ID_PATTERN.fullmatch(i)]
        if malformed:
            raise ValueError(f"Malformed transaction ids: {', '.join(malformed)}")

        spark = clients.spark()
        found = {
            row.id
            for row in spark.read.table(self.table_name)
            .filter(F.col("id").isin(unique_ids))
            .select("id")
            .collect()
        }
        missing = [i for i in unique_ids if i not in found]
        if missing:
            raise ValueError(f"Unknown transaction ids: {', '.join(missing)}")

        statement, args = submission_statement(self.table_name, unique_ids)
        spark.sql(statement, args=args)
        LOG.info("Submitted %d transactions in %s", len(unique_ids), self.table_name)
        return {"submitted": len(unique_ids)}

    def list_product_options(self) -> list[FilterOption]:
        return self._distinct_options("product", "product_id", "product_name")

    def list_status_options(self) -> list[FilterOption]:
        return self._distinct_options("status", "gift_aid_status", "gift_aid_status")

    def list_company_options(self) -> list[FilterOption]:
        return self._distinct_options("company", "company_id", "company_name")

    def _distinct_options(
        self, kind: str, value_column: str, label_column: str
    ) -> list[FilterOption]:
        """Distinct (label, value) pairs of two columns, cached on disk."""
        cache_key = objects.hash_key([self.table_name, kind])

        def _load() -> list[dict]:
            rows = (
                clients.spark()
                .read.table(self.table_name)
                .where(F.col(value_column).isNotNull())
                .select(
                    F.col(label_column).alias("label"),
                    F.col(value_column).alias("value"),
                )
                .distinct()
                .orderBy("label")
                .collect()
            )
            LOG.info("Loaded %d %s options", len(rows), kind)
            return [{"label": str(row.label), "value": str(row.value)} for row in rows]

        return [
            FilterOption.from_dict(option)
            for option in self._DISK_CACHE.get_or_load(cache_key, _load)
        ]

    def resolve_current_user_scope(self) -> UserScope | None:
        """Look up the current user's company; None when unknown."""
        if not settings.USER_COMPANY_TABLE:
            LOG.info("GIFT_AID_USER_COMPANY_TABLE is not set; no default company")
            return None
        user_name = clients.current_user_name()
        if not user_name:
            return None
        rows = (
            clients.spark()
            .read.table(settings.USER_COMPANY_TABLE)
            .filter(F.col("user_name") == F.lit(user_name))
            .select("company_id", "company_name")
            .limit(1)
            .collect()
        )
        if not rows:
            LOG.info("No company mapped for user %s", user_name)
            return None
        return UserScope(
            scope_id=str(rows[0].company_id), scope_label=rows[0].company_name or ""
        )
