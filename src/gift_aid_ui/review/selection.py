"""
Page-independent selection of transactions.

The table only ever reports "the rows currently checked on this page",
never deltas. SelectionRegistry turns those per-page reports into a
selection that spans every page:

    registry.reconcile_page(current_page_ids, checked_rows)

drops every id of the current page that is no longer checked and adds or
refreshes the checked rows. Ids belonging to other pages are untouched, so
navigating away and back neither loses a selection nor resurrects a
deselected row.
"""

from typing import Iterable

from gift_aid_ui.models.transaction import (
    Transaction,
    deserialize_transaction,
    serialize_transaction,
)


class SelectionRegistry:
    """Ordered mapping of selected transaction id to its last-known snapshot."""

    def __init__(self, rows: Iterable[Transaction] = ()) -> None:
        self._selected: dict[str, Transaction] = {}
        for row in rows:
            self._selected[row.id] = row

    def reconcile_page(
        self,
        current_page_ids: Iterable[str],
        newly_selected_rows: Iterable[Transaction],
    ) -> None:
        """
        Apply the checked-rows report of one page.

        Every id in current_page_ids that is not in newly_selected_rows is
        removed; every row in newly_selected_rows is inserted or refreshed.
        Ids that stay selected keep their original position.

        Args:
            current_page_ids: Ids of all rows visible on the page.
            newly_selected_rows: Rows currently checked on that page.
        """
        rows = list(newly_selected_rows)
        keep = {row.id for row in rows}
        for row_id in current_page_ids:
            if row_id not in keep:
                self._selected.pop(row_id, None)
        for row in rows:
            self._selected[row.id] = row

    def selected_ids(self) -> list[str]:
        """Selected ids in order of first selection."""
        return list(self._selected)

    def selected_rows(self) -> list[Transaction]:
        return list(self._selected.values())

    def page_selection(self, page_ids: Iterable[str]) -> list[str]:
        """Return the ids of page_ids that are selected, in page order."""
        return [row_id for row_id in page_ids if row_id in self._selected]

    def is_selected(self, row_id: str) -> bool:
        return row_id in self._selected

    def count(self) -> int:
        return len(self._selected)

    def clear(self) -> None:
        self._selected.clear()

    def __len__(self) -> int:
        return len(self._selected)

    def __contains__(self, row_id: object) -> bool:
        return row_id in self._selected

    def to_dict(self) -> dict:
        return {"rows": [serialize_transaction(r) for r in self._selected.values()]}

    @classmethod
    def from_dict(cls, data: dict | None) -> "SelectionRegistry":
        if not data:
            return cls()
        return cls(deserialize_transaction(r) for r in data.get("rows", []))
