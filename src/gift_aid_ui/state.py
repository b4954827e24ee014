"""
Reflex state for the Gift Aid Submission UI.

GiftAidState keeps the whole review session as one serialized backend
value. Each event rebuilds a ReviewSession from it, runs one action,
stores the result and copies what the page renders into frontend vars.
Session notices are returned as toasts.
"""

from typing import Any, Generator

import reflex as rx

from gift_aid_ui import settings
from gift_aid_ui.lib import logs
from gift_aid_ui.models.common import Notice
from gift_aid_ui.models.transaction import Transaction, serialize_transaction
from gift_aid_ui.review import ReviewSession
from gift_aid_ui.services import get_transaction_service

LOG = logs.logger(__file__)

APP_TITLE = "Gift Aid Submission"
APP_SUBTITLE = "Select Sales Invoice Transactions to submit for Gift Aid."

_TOASTS = {
    "info": rx.toast.info,
    "success": rx.toast.success,
    "warning": rx.toast.warning,
    "error": rx.toast.error,
}


def _get_service():
    """Get the configured transaction service (lazy loaded)."""
    return get_transaction_service()


def _toast(notice: Notice) -> Any:
    return _TOASTS.get(notice.level, rx.toast.info)(
        notice.title, description=notice.message
    )


def _display_row(transaction: Transaction) -> dict[str, str]:
    return {
        key: "" if value is None else str(value)
        for key, value in serialize_transaction(transaction).items()
    }


def _options(options: list) -> list[dict[str, str]]:
    return [option.to_dict() for option in options]


class GiftAidState(rx.State):
    """
    Main application state for the Gift Aid Submission page.

    Frontend vars mirror the session; the session itself lives in the
    backend-only _session_data var.
    """

    # Visible page
    rows: list[dict[str, str]] = []
    page_selected_ids: list[str] = []
    is_page_selected: bool = False
    page_number: int = 1
    total_pages: int = 1
    total_records: int = 0
    is_prev_disabled: bool = True
    is_next_disabled: bool = True

    # Selection
    selected_count: int = 0
    selected_badge_label: str = "0 Selected"

    # Filters
    start_date: str = ""
    end_date: str = ""
    selected_product: str = ""
    selected_status: str = settings.DEFAULT_STATUS
    selected_company: str = ""
    product_options: list[dict[str, str]] = []
    status_options: list[dict[str, str]] = []
    company_options: list[dict[str, str]] = []

    is_loading: bool = False

    _session_data: dict = {}

    @rx.var
    def page_label(self) -> str:
        return f"Page {self.page_number} of {self.total_pages}"

    @rx.var
    def is_empty(self) -> bool:
        """Check if empty state should be shown."""
        return not self.is_loading and self.total_records == 0

    @rx.event
    def on_load(self) -> Generator:
        """Initial page load: resolve the user's company and run the default query."""
        self.is_loading = True
        yield
        session = ReviewSession(_get_service())
        session.initialize()
        yield self._commit(session)

    @rx.event
    def set_start_date(self, value: str):
        return self._update_filter(start_date=value)

    @rx.event
    def set_end_date(self, value: str):
        return self._update_filter(end_date=value)

    @rx.event
    def set_product(self, value: str):
        return self._update_filter(product_id=value)

    @rx.event
    def set_status(self, value: str):
        return self._update_filter(gift_aid_status=value)

    @rx.event
    def set_company(self, value: str):
        return self._update_filter(company_id=value)

    @rx.event
    def apply_filter(self) -> Generator:
        self.is_loading = True
        yield
        session = self._session()
        session.apply_filters()
        yield self._commit(session)

    @rx.event
    def reset_filters(self) -> Generator:
        self.is_loading = True
        yield
        session = self._session()
        session.reset_filters()
        yield self._commit(session)

    @rx.event
    def next_page(self):
        session = self._session()
        session.next_page()
        return self._commit(session)

    @rx.event
    def prev_page(self):
        session = self._session()
        session.prev_page()
        return self._commit(session)

    @rx.event
    def toggle_row(self, row_id: str, checked: bool):
        session = self._session()
        session.toggle_row(row_id, checked)
        return self._commit(session)

    @rx.event
    def toggle_page(self, checked: bool):
        session = self._session()
        session.toggle_page(checked)
        return self._commit(session)

    @rx.event
    def submit(self) -> Generator:
        self.is_loading = True
        yield
        session = self._session()
        session.submit()
        yield self._commit(session)

    @rx.event
    def export(self):
        session = self._session()
        export = session.export()
        events = self._commit(session)
        if export is not None:
            events.insert(0, rx.download(data=export.data, filename=export.filename))
        return events

    def _update_filter(self, **values: str):
        session = self._session()
        session.set_filter(**values)
        return self._commit(session)

    def _session(self) -> ReviewSession:
        return ReviewSession.from_dict(self._session_data, _get_service())

    def _commit(self, session: ReviewSession) -> list:
        """Store the session, refresh frontend vars and return pending toasts."""
        self._session_data = session.to_dict()

        pagination = session.pagination
        self.rows = [_display_row(row) for row in session.current_rows]
        self.page_selected_ids = session.page_selected_ids
        self.is_page_selected = bool(self.rows) and len(self.page_selected_ids) == len(
            self.rows
        )
        self.page_number = pagination.page
        self.total_pages = pagination.total_pages
        self.total_records = pagination.total
        self.is_prev_disabled = pagination.is_prev_disabled
        self.is_next_disabled = pagination.is_next_disabled

        self.selected_count = session.selected_count
        self.selected_badge_label = session.selected_badge_label

        criteria = session.criteria
        self.start_date = criteria.start_date.isoformat() if criteria.start_date else ""
        self.end_date = criteria.end_date.isoformat() if criteria.end_date else ""
        self.selected_product = criteria.product_id or ""
        self.selected_status = criteria.gift_aid_status or ""
        self.selected_company = criteria.company_id or ""
        self.product_options = _options(session.options.products)
        self.status_options = _options(session.options.statuses)
        self.company_options = _options(session.options.companies)

        self.is_loading = session.is_loading
        return [_toast(notice) for notice in session.drain_notices()]
