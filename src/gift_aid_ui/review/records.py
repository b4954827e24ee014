"""Holder for the transactions returned by the last successful query."""

from typing import Iterable, Iterator, Sequence

from gift_aid_ui.models.transaction import (
    Transaction,
    deserialize_transaction,
    serialize_transaction,
)


class RecordStore:
    """
    The full filtered result set, in server order.

    Contents are replaced wholesale on every successful query and never
    mutated in place.
    """

    def __init__(self, records: Iterable[Transaction] = ()) -> None:
        self._records: tuple[Transaction, ...] = tuple(records)

    @property
    def records(self) -> Sequence[Transaction]:
        return self._records

    def replace(self, records: Iterable[Transaction]) -> None:
        """Swap in a new result set."""
        self._records = tuple(records)

    def ids(self) -> list[str]:
        return [record.id for record in self._records]

    def is_empty(self) -> bool:
        return not self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(self._records)

    def to_dict(self) -> dict:
        return {"records": [serialize_transaction(r) for r in self._records]}

    @classmethod
    def from_dict(cls, data: dict | None) -> "RecordStore":
        if not data:
            return cls()
        return cls(deserialize_transaction(r) for r in data.get("records", []))
