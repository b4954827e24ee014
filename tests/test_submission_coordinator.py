import pytest

from gift_aid_ui.errors import TransportError, ValidationError
from gift_aid_ui.review.filters import FilterState
from gift_aid_ui.review.paginator import Paginator
from gift_aid_ui.review.query import QueryCoordinator
from gift_aid_ui.review.records import RecordStore
from gift_aid_ui.review.selection import SelectionRegistry
from gift_aid_ui.review.submission import SubmissionCoordinator


@pytest.fixture
def parts(service):
    store = RecordStore()
    selection = SelectionRegistry()
    filters = FilterState()
    paginator = Paginator(store.records, page_size=10)
    queries = QueryCoordinator(service, store, filters, paginator, selection)
    queries.load_base()
    submissions = SubmissionCoordinator(service, selection, queries)
    return submissions, selection, filters, paginator


def _select_first(selection, paginator, count):
    selection.reconcile_page(paginator.visible_ids(), paginator.current_slice()[:count])


def test_empty_selection_makes_no_remote_call(parts, service):
    submissions, _, _, _ = parts

    with pytest.raises(ValidationError, match="Please select the Transaction."):
        submissions.submit()

    assert service.submissions == []


def test_successful_submission_clears_selection_and_reloads(parts, service):
    submissions, selection, _, paginator = parts
    _select_first(selection, paginator, 2)
    paginator.next_page()
    _select_first(selection, paginator, 1)
    requests_before = len(service.requests)

    result = submissions.submit()

    assert service.submissions == [["T001", "T002", "T011"]]
    assert result.ids == ["T001", "T002", "T011"]
    assert result.response == {"submitted": 3}
    assert result.refreshed
    assert selection.count() == 0
    assert len(service.requests) == requests_before + 1
    assert paginator.page == 1


def test_reload_reapplies_filters_when_date_range_is_set(parts, service):
    submissions, selection, filters, paginator = parts
    filters.update(start_date="2025-01-01", end_date="2025-01-31", company_id="CMP-1")
    _select_first(selection, paginator, 1)

    submissions.submit()

    assert service.requests[-1]["startDate"] == "2025-01-01"
    assert service.requests[-1]["companyId"] == "CMP-1"


def test_reload_runs_base_query_without_full_date_range(parts, service):
    submissions, selection, filters, paginator = parts
    filters.update(start_date="2025-01-01", company_id="CMP-1")
    _select_first(selection, paginator, 1)

    submissions.submit()

    assert set(service.requests[-1].values()) == {None}


def test_failed_submission_keeps_selection(parts, service):
    submissions, selection, _, paginator = parts
    _select_first(selection, paginator, 2)
    service.fail_submit = True
    requests_before = len(service.requests)

    with pytest.raises(TransportError, match="Gift Aid Submission failed.") as exc_info:
        submissions.submit()

    assert exc_info.value.operation == "submit"
    assert selection.selected_ids() == ["T001", "T002"]
    assert len(service.requests) == requests_before


def test_failed_reload_still_reports_submission(parts, service):
    submissions, selection, _, paginator = parts
    _select_first(selection, paginator, 1)
    service.fail_fetch = True

    result = submissions.submit()

    assert not result.refreshed
    assert selection.count() == 0
    assert service.submissions == [["T001"]]
