"""
The review session: one owner for all state of a Gift Aid review.

ReviewSession composes the record store, selection, paginator, filters
and the two coordinators, tracks the busy flag and collects notices for
the UI. Every user action is a method returning a success flag; errors
never escape, they become notices and leave prior state intact.

The whole session round-trips through to_dict()/from_dict(), so a UI
framework can keep it as a single serializable value between events.
"""

from contextlib import contextmanager
from datetime import date
from typing import Any, Callable, Iterable, Iterator

from gift_aid_ui import settings
from gift_aid_ui.errors import ReviewError, ValidationError
from gift_aid_ui.lib import logs
from gift_aid_ui.models.common import (
    NONE_OPTION,
    FilterCriteria,
    FilterOption,
    FilterOptions,
    Notice,
    PaginationState,
    UserScope,
)
from gift_aid_ui.models.transaction import Transaction
from gift_aid_ui.review.export import ExportFile, build_export
from gift_aid_ui.review.filters import FilterState
from gift_aid_ui.review.paginator import Paginator
from gift_aid_ui.review.query import QueryCoordinator
from gift_aid_ui.review.records import RecordStore
from gift_aid_ui.review.selection import SelectionRegistry
from gift_aid_ui.review.submission import SubmissionCoordinator
from gift_aid_ui.services.transaction_service import TransactionService

LOG = logs.logger(__file__)


class ReviewSession:
    """
    State and actions of one Gift Aid review session.

    Attributes:
        store: Loaded transactions.
        selection: Cross-page selection.
        filters: Current filter values.
        paginator: Page window over the store.
        queries: Query coordinator.
        submissions: Submission coordinator.
        default_scope: The user's resolved company, if any.
        options: Filter picker options.
        is_loading: True while a remote call is in flight.
    """

    def __init__(
        self,
        service: TransactionService,
        page_size: int = settings.PAGE_SIZE,
        *,
        store: RecordStore | None = None,
        selection: SelectionRegistry | None = None,
        filters: FilterState | None = None,
        page: int = 1,
        default_scope: UserScope | None = None,
        options: FilterOptions | None = None,
    ) -> None:
        self.service = service
        self.store = store if store is not None else RecordStore()
        self.selection = selection if selection is not None else SelectionRegistry()
        self.filters = filters if filters is not None else FilterState()
        self.paginator = Paginator(self.store.records, page_size=page_size, page=page)
        self.queries = QueryCoordinator(
            service, self.store, self.filters, self.paginator, self.selection
        )
        self.submissions = SubmissionCoordinator(service, self.selection, self.queries)
        self.default_scope = default_scope
        self.options = options if options is not None else FilterOptions()
        self.is_loading = False
        self._notices: list[Notice] = []

    @property
    def criteria(self) -> FilterCriteria:
        return self.filters.criteria

    @property
    def current_rows(self) -> list[Transaction]:
        return self.paginator.current_slice()

    @property
    def pagination(self) -> PaginationState:
        return self.paginator.state

    @property
    def selected_ids(self) -> list[str]:
        return self.selection.selected_ids()

    @property
    def selected_count(self) -> int:
        return self.selection.count()

    @property
    def selected_badge_label(self) -> str:
        return f"{self.selection.count()} Selected"

    @property
    def page_selected_ids(self) -> list[str]:
        """Selected ids on the visible page; used to restore checkboxes."""
        return self.selection.page_selection(self.paginator.visible_ids())

    def initialize(self) -> bool:
        """Resolve the user's scope, load picker options and run the default load."""
        resolution = self.queries.resolve_default_scope()
        self.default_scope = resolution.scope
        if resolution.fell_back:
            self.notify(Notice.info("Loading transactions without company filter"))
        self.filters.update(
            gift_aid_status=self.queries.default_status,
            company_id=resolution.scope.scope_id if resolution.scope else None,
        )
        self.load_filter_options()
        return self._run(lambda: self.queries.load_default(resolution.scope))

    def load_filter_options(self) -> FilterOptions:
        self.options = FilterOptions(
            products=self._load_options("product", self.service.list_product_options),
            statuses=self._load_options(
                "status", self.service.list_status_options, with_none=True
            ),
            companies=self._load_options(
                "company", self.service.list_company_options, with_none=True
            ),
        )
        return self.options

    def set_filter(self, **values: Any) -> bool:
        try:
            self.filters.update(**values)
        except ValidationError as exc:
            self.notify(Notice.error(str(exc)))
            return False
        return True

    def apply_filters(self) -> bool:
        return self._run(self.queries.apply_filters)

    def reset_filters(self) -> bool:
        """Clear every filter and the selection, then run the base query."""
        self.filters.reset()
        self.selection.clear()
        return self._run(self.queries.load_base)

    def select_rows(self, checked_ids: Iterable[str]) -> None:
        """
        Apply the checked-row report of the visible page.

        Args:
            checked_ids: Ids currently checked on the visible page.
        """
        checked = set(checked_ids)
        page_rows = self.paginator.current_slice()
        self.selection.reconcile_page(
            [row.id for row in page_rows],
            [row for row in page_rows if row.id in checked],
        )

    def toggle_row(self, row_id: str, selected: bool) -> None:
        checked = set(self.page_selected_ids)
        if selected:
            checked.add(row_id)
        else:
            checked.discard(row_id)
        self.select_rows(checked)

    def toggle_page(self, selected: bool) -> None:
        self.select_rows(self.paginator.visible_ids() if selected else [])

    def next_page(self, page_selection: Iterable[str] | None = None) -> bool:
        """
        Move to the next page.

        Args:
            page_selection: Optional checked ids of the outgoing page,
                reconciled before the slice changes.
        """
        if page_selection is not None:
            self.select_rows(page_selection)
        return self.paginator.next_page()

    def prev_page(self, page_selection: Iterable[str] | None = None) -> bool:
        if page_selection is not None:
            self.select_rows(page_selection)
        return self.paginator.prev_page()

    def submit(self) -> bool:
        """Submit the selection; returns False on validation or transport failure."""
        with self._busy():
            try:
                result = self.submissions.submit()
            except ReviewError as exc:
                self.notify(Notice.error(str(exc), exc.title))
                return False
        self.notify(Notice.success("Gift Aid Submission completed successfully."))
        if not result.refreshed:
            self.notify(Notice.error("Failed to load transactions"))
        return True

    def export(self, export_date: date | None = None) -> ExportFile | None:
        """Build a CSV export of every loaded record."""
        try:
            export = build_export(self.store.records, export_date)
        except ValidationError as exc:
            self.notify(Notice.warning(str(exc)))
            return None
        LOG.info("Exporting %d records to %s", export.record_count, export.filename)
        self.notify(Notice.success(f"Exported {export.record_count} records"))
        return export

    def notify(self, notice: Notice) -> None:
        self._notices.append(notice)

    def drain_notices(self) -> list[Notice]:
        """Return pending notices and forget them."""
        notices, self._notices = self._notices, []
        return notices

    def to_dict(self) -> dict:
        return {
            "store": self.store.to_dict(),
            "selection": self.selection.to_dict(),
            "filters": self.filters.to_dict(),
            "page": self.paginator.page,
            "page_size": self.paginator.page_size,
            "default_scope": self.default_scope.to_dict() if self.default_scope else None,
            "options": self.options.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict | None, service: TransactionService) -> "ReviewSession":
        if not data:
            return cls(service)
        return cls(
            service,
            page_size=data.get("page_size", settings.PAGE_SIZE),
            store=RecordStore.from_dict(data.get("store")),
            selection=SelectionRegistry.from_dict(data.get("selection")),
            filters=FilterState.from_dict(data.get("filters")),
            page=data.get("page", 1),
            default_scope=UserScope.from_dict(data.get("default_scope")),
            options=FilterOptions.from_dict(data.get("options")),
        )

    @contextmanager
    def _busy(self) -> Iterator[None]:
        self.is_loading = True
        try:
            yield
        finally:
            self.is_loading = False

    def _run(self, action: Callable[[], Any]) -> bool:
        with self._busy():
            try:
                action()
            except ReviewError as exc:
                self.notify(Notice.error(str(exc), exc.title))
                return False
        return True

    def _load_options(
        self,
        kind: str,
        loader: Callable[[], Iterable[FilterOption]],
        with_none: bool = False,
    ) -> list[FilterOption]:
        try:
            options = list(loader())
        except Exception:
            LOG.error("Error fetching %s options", kind, exc_info=True)
            self.notify(Notice.error(f"Failed to load {kind} options"))
            return []
        LOG.info("Loaded %d %s options", len(options), kind)
        return [NONE_OPTION, *options] if with_none else options
