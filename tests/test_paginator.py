import pytest

from gift_aid_ui.models.transaction import Transaction
from gift_aid_ui.review.paginator import Paginator


def _records(count: int) -> list[Transaction]:
    return [Transaction(id=f"T{i}") for i in range(1, count + 1)]


def test_twenty_five_records_make_three_pages():
    paginator = Paginator(_records(25), page_size=10)

    assert paginator.total_pages == 3
    assert len(paginator.current_slice()) == 10
    assert paginator.is_prev_disabled
    assert not paginator.is_next_disabled

    assert paginator.next_page()
    assert len(paginator.current_slice()) == 10
    assert not paginator.is_prev_disabled
    assert not paginator.is_next_disabled

    assert paginator.next_page()
    assert paginator.page == 3
    assert len(paginator.current_slice()) == 5
    assert paginator.visible_ids() == ["T21", "T22", "T23", "T24", "T25"]
    assert paginator.is_next_disabled
    assert not paginator.is_prev_disabled


def test_navigation_stops_at_bounds():
    paginator = Paginator(_records(15), page_size=10)

    assert not paginator.prev_page()
    assert paginator.page == 1

    paginator.next_page()
    assert not paginator.next_page()
    assert paginator.page == 2


def test_empty_source_has_one_empty_page():
    paginator = Paginator([], page_size=10)

    assert paginator.total_pages == 1
    assert paginator.current_slice() == []
    assert paginator.is_prev_disabled
    assert paginator.is_next_disabled
    assert not paginator.next_page()
    assert not paginator.prev_page()


def test_exact_multiple_has_no_trailing_empty_page():
    paginator = Paginator(_records(20), page_size=10)

    assert paginator.total_pages == 2


def test_set_source_resets_to_first_page():
    paginator = Paginator(_records(25), page_size=10)
    paginator.next_page()
    paginator.next_page()

    paginator.set_source(_records(12))

    assert paginator.page == 1
    assert paginator.total_pages == 2


def test_initial_page_is_clamped_to_range():
    assert Paginator(_records(5), page_size=10, page=4).page == 1
    assert Paginator(_records(25), page_size=10, page=0).page == 1


def test_state_reports_window():
    paginator = Paginator(_records(25), page_size=10)
    paginator.next_page()

    state = paginator.state

    assert (state.page, state.page_size, state.total) == (2, 10, 25)
    assert state.total_pages == 3


def test_page_size_must_be_positive():
    with pytest.raises(ValueError):
        Paginator(_records(3), page_size=0)
