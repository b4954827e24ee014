import pytest

pytest.importorskip("databricks.connect")

from gift_aid_ui.services.transaction_service_impl import submission_statement  # noqa: E402


def test_submission_binds_ids_and_status():
    statement, args = submission_statement("main.gift_aid.transactions", ("SIT-1", "SIT-2"))

    assert statement.startswith("UPDATE main.gift_aid.transactions SET")
    assert "array_contains(:ids, id)" in statement
    assert ":status" in statement
    assert "SIT-1" not in statement
    assert args == {"status": "Submitted", "ids": ["SIT-1", "SIT-2"]}
