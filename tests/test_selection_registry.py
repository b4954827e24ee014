from gift_aid_ui.models.transaction import Transaction
from gift_aid_ui.review.selection import SelectionRegistry


def _rows(*ids: str) -> list[Transaction]:
    return [Transaction(id=row_id) for row_id in ids]


def test_reconcile_page_adds_checked_rows():
    registry = SelectionRegistry()

    registry.reconcile_page(["A", "B", "C"], _rows("A", "C"))

    assert registry.selected_ids() == ["A", "C"]
    assert registry.count() == 2


def test_reconcile_page_leaves_other_pages_untouched():
    registry = SelectionRegistry()
    registry.reconcile_page(["A", "B"], _rows("A", "B"))
    registry.reconcile_page(["C", "D"], _rows("C"))

    registry.reconcile_page(["A", "B"], _rows("A"))

    assert registry.selected_ids() == ["A", "C"]
    assert "B" not in registry


def test_unchecking_every_row_on_page_clears_only_that_page():
    registry = SelectionRegistry()
    registry.reconcile_page(["A", "B"], _rows("A", "B"))
    registry.reconcile_page(["C"], _rows("C"))

    registry.reconcile_page(["A", "B"], [])

    assert registry.selected_ids() == ["C"]


def test_selected_ids_keep_order_of_first_selection():
    registry = SelectionRegistry()
    registry.reconcile_page(["A", "B"], _rows("A"))
    registry.reconcile_page(["C", "D"], _rows("C"))

    # Page 1 reports A (still checked) plus the newly checked B
    registry.reconcile_page(["A", "B"], _rows("A", "B"))

    assert registry.selected_ids() == ["A", "C", "B"]


def test_reconcile_refreshes_snapshot_of_reselected_row():
    registry = SelectionRegistry()
    registry.reconcile_page(["A"], [Transaction(id="A", paid_amount="1.00")])

    registry.reconcile_page(["A"], [Transaction(id="A", paid_amount="2.00")])

    assert registry.selected_rows() == [Transaction(id="A", paid_amount="2.00")]


def test_empty_and_repeated_inputs_are_harmless():
    registry = SelectionRegistry()

    registry.reconcile_page([], [])
    registry.reconcile_page(["A"], [])
    registry.reconcile_page(["A"], _rows("A"))
    registry.reconcile_page(["A"], _rows("A"))

    assert registry.selected_ids() == ["A"]


def test_page_selection_follows_page_order():
    registry = SelectionRegistry()
    registry.reconcile_page(["C", "A", "B"], _rows("B", "C"))

    assert registry.page_selection(["A", "B", "C"]) == ["B", "C"]
    assert registry.is_selected("C")
    assert not registry.is_selected("A")


def test_clear_empties_registry():
    registry = SelectionRegistry(_rows("A", "B"))

    registry.clear()

    assert registry.count() == 0
    assert registry.selected_ids() == []


def test_serialized_registry_keeps_rows_and_order():
    registry = SelectionRegistry()
    registry.reconcile_page(["B"], [Transaction(id="B", account_name="Smith")])
    registry.reconcile_page(["A"], _rows("A"))

    restored = SelectionRegistry.from_dict(registry.to_dict())

    assert restored.selected_ids() == ["B", "A"]
    assert restored.selected_rows()[0].account_name == "Smith"
