"""Live filter values and their validation."""

from typing import Any

from gift_aid_ui.errors import ValidationError
from gift_aid_ui.lib import logs
from gift_aid_ui.models.common import FilterCriteria
from gift_aid_ui.utils import is_blank, parse_date

LOG = logs.logger(__file__)

_DATE_FIELDS = ("start_date", "end_date")
_ID_FIELDS = ("product_id", "gift_aid_status", "company_id")


class FilterState:
    """
    Holds the current filter criteria.

    Values arrive from the UI as strings; blank strings mean "no
    constraint" and are stored as None.
    """

    def __init__(self, criteria: FilterCriteria | None = None) -> None:
        self._criteria = criteria or FilterCriteria()

    @property
    def criteria(self) -> FilterCriteria:
        return self._criteria

    @property
    def has_date_range(self) -> bool:
        return self._criteria.has_date_range

    def update(self, **values: Any) -> FilterCriteria:
        """
        Change one or more filter fields.

        Raises:
            ValidationError: For an unknown field or a malformed date.
        """
        changes = {}
        for name, value in values.items():
            if name in _DATE_FIELDS:
                try:
                    changes[name] = parse_date(value)
                except (TypeError, ValueError) as exc:
                    raise ValidationError(f"Invalid date: {value!r}") from exc
            elif name in _ID_FIELDS:
                changes[name] = None if is_blank(value) else str(value)
            else:
                raise ValidationError(f"Unknown filter field: {name}")
        self._criteria = self._criteria.with_changes(**changes)
        LOG.debug("Filter changed - %s", changes)
        return self._criteria

    def validate(self) -> FilterCriteria:
        """
        Return the criteria if they can be queried.

        Raises:
            ValidationError: If the start date is after the end date.
        """
        if not self._criteria.is_date_range_valid:
            raise ValidationError("Start date cannot be greater than end date.")
        return self._criteria

    def reset(self) -> None:
        self._criteria = FilterCriteria()

    def to_dict(self) -> dict:
        return self._criteria.to_dict()

    @classmethod
    def from_dict(cls, data: dict | None) -> "FilterState":
        return cls(FilterCriteria.from_dict(data))
