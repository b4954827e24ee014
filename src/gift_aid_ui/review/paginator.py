"""
Client-side pagination over the loaded result set.

The page resets to 1 whenever the source changes (a new query) and is
preserved by next/prev. Navigation never wraps and never raises at the
bounds.
"""

import math
from typing import Sequence

from gift_aid_ui.models.common import PaginationState
from gift_aid_ui.models.transaction import Transaction


class Paginator:
    """Derives the visible slice of a record sequence."""

    def __init__(
        self,
        records: Sequence[Transaction] = (),
        page_size: int = 10,
        page: int = 1,
    ) -> None:
        if page_size < 1:
            raise ValueError(f"page_size must be at least 1, got {page_size}")
        self._page_size = page_size
        self._records: Sequence[Transaction] = records
        self._page = min(max(page, 1), self.total_pages)

    @property
    def page(self) -> int:
        return self._page

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def total_pages(self) -> int:
        return max(1, math.ceil(len(self._records) / self._page_size))

    @property
    def is_prev_disabled(self) -> bool:
        return self._page <= 1

    @property
    def is_next_disabled(self) -> bool:
        return self._page >= self.total_pages

    @property
    def state(self) -> PaginationState:
        return PaginationState(
            page=self._page, page_size=self._page_size, total=len(self._records)
        )

    def set_source(self, records: Sequence[Transaction]) -> None:
        """Point at a new result set and go back to page 1."""
        self._records = records
        self._page = 1

    def current_slice(self) -> list[Transaction]:
        start = (self._page - 1) * self._page_size
        return list(self._records[start : start + self._page_size])

    def visible_ids(self) -> list[str]:
        return [record.id for record in self.current_slice()]

    def next_page(self) -> bool:
        """Advance one page; returns False at the last page."""
        if self._page < self.total_pages:
            self._page += 1
            return True
        return False

    def prev_page(self) -> bool:
        """Go back one page; returns False at the first page."""
        if self._page > 1:
            self._page -= 1
            return True
        return False
