import pytest

from gift_aid_ui.data.demo_transactions import DEMO_TRANSACTIONS
from gift_aid_ui.models.common import UserScope
from gift_aid_ui.review.session import ReviewSession
from gift_aid_ui.services import get_transaction_service
from gift_aid_ui.services.transaction_service_demo import DemoTransactionService

_ALL = {"startDate": None, "endDate": None, "productId": None, "giftAidStatus": None, "companyId": None}


def _request(**values):
    return {**_ALL, **values}


def test_fetch_without_constraints_returns_every_row():
    rows = DemoTransactionService().fetch_transactions(_ALL)

    assert len(rows) == 36
    assert rows[0]["Id"] == "SIT-0001"


def test_fetch_filters_by_status_and_company():
    service = DemoTransactionService()

    rows = service.fetch_transactions(
        _request(giftAidStatus="Non-Submitted", companyId="CMP-001")
    )

    assert rows
    assert all(r["giftAidStatus"] == "Non-Submitted" for r in rows)
    assert all(r["companyId"] == "CMP-001" for r in rows)


def test_date_range_is_inclusive():
    service = DemoTransactionService()

    rows = service.fetch_transactions(_request(startDate="2025-11-03", endDate="2025-11-05"))

    assert [r["Id"] for r in rows] == ["SIT-0001", "SIT-0002", "SIT-0003"]


def test_submit_marks_rows_submitted():
    service = DemoTransactionService()

    assert service.submit_selection(["SIT-0001", "SIT-0002"]) == {"submitted": 2}

    submitted = service.fetch_transactions(_request(giftAidStatus="Submitted"))
    assert {"SIT-0001", "SIT-0002"} <= {r["Id"] for r in submitted}


def test_submit_with_unknown_id_changes_nothing():
    service = DemoTransactionService()

    with pytest.raises(ValueError):
        service.submit_selection(["SIT-0001", "missing"])

    row = service.fetch_transactions(_request(startDate="2025-11-03", endDate="2025-11-03"))[0]
    assert row["giftAidStatus"] == "Non-Submitted"


def test_instances_do_not_share_fixture_rows():
    DemoTransactionService().submit_selection(["SIT-0001"])

    assert DEMO_TRANSACTIONS[0]["giftAidStatus"] == "Non-Submitted"


def test_options_and_scope():
    service = DemoTransactionService(scope=UserScope("CMP-002", "Riverside Foundation"))

    assert [o.value for o in service.list_company_options()] == ["CMP-001", "CMP-002"]
    assert len(service.list_product_options()) == 3
    assert [o.value for o in service.list_status_options()] == ["Non-Submitted", "Submitted"]
    assert service.resolve_current_user_scope().scope_id == "CMP-002"


def test_service_factory():
    assert isinstance(get_transaction_service("demo"), DemoTransactionService)
    assert get_transaction_service("demo") is get_transaction_service("demo")
    with pytest.raises(ValueError):
        get_transaction_service("nope")


def test_review_workflow_against_demo_data():
    service = DemoTransactionService()
    session = ReviewSession(service, page_size=10)

    assert session.initialize()
    assert len(session.store) == 30
    assert session.pagination.total_pages == 3

    session.select_rows(["SIT-0001", "SIT-0002"])
    session.next_page()
    session.select_rows([session.current_rows[0].id])
    assert session.submit()

    # No date range was set, so the reload is unconstrained
    assert len(session.store) == 36
    assert session.selected_count == 0
    statuses = [r.gift_aid_status for r in session.store]
    assert statuses.count("Submitted") == 9


def test_demo_data_shows_invalid_amount_as_nan():
    session = ReviewSession(DemoTransactionService(), page_size=10)
    session.reset_filters()

    record = next(r for r in session.store if r.id == "SIT-0018")

    assert record.paid_amount == "NaN"
    assert not record.has_valid_amount
