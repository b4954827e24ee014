from datetime import date, datetime
from decimal import Decimal

import pytest

from gift_aid_ui.errors import DataShapeError
from gift_aid_ui.utils import (
    end_of_day,
    format_amount,
    is_blank,
    parse_amount,
    parse_date,
    start_of_day,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        (12.5, "12.50"),
        ("7", "7.00"),
        (Decimal("3.1"), "3.10"),
        ("2.345", "2.35"),
        (0.125, "0.13"),
        (" 4.2 ", "4.20"),
        (None, "0.00"),
        ("", "0.00"),
        ("abc", "NaN"),
        (float("nan"), "NaN"),
        (float("inf"), "NaN"),
        ([1], "NaN"),
        (True, "1.00"),
        (False, "0.00"),
        (1.005, "1.00"),
        ("1.005", "1.01"),
        ("1e30", "1000000000000000000000000000000.00"),
        (Decimal("-1E+40"), "-10000000000000000000000000000000000000000.00"),
        ("1e-30", "0.00"),
    ],
)
def test_format_amount(raw, expected):
    assert format_amount(raw) == expected


def test_parse_amount_rejects_non_numbers():
    with pytest.raises(DataShapeError):
        parse_amount("12,50")
    with pytest.raises(DataShapeError):
        parse_amount({"amount": 1})


def test_parse_date():
    assert parse_date("2025-01-02") == date(2025, 1, 2)
    assert parse_date(date(2025, 1, 2)) == date(2025, 1, 2)
    assert parse_date(datetime(2025, 1, 2, 13, 30)) == date(2025, 1, 2)
    assert parse_date("  ") is None
    assert parse_date(None) is None
    with pytest.raises(ValueError):
        parse_date("2025-02-30")


def test_day_bounds_are_inclusive():
    day = date(2025, 1, 31)

    assert start_of_day(day) == datetime(2025, 1, 31, 0, 0, 0)
    assert end_of_day(day) == datetime(2025, 1, 31, 23, 59, 59, 999999)


def test_is_blank():
    assert is_blank(None)
    assert is_blank(" ")
    assert not is_blank("x")
    assert not is_blank(0)


def test_format_amount_writes_huge_floats_in_full():
    formatted = format_amount(1e30)

    assert formatted == f"{Decimal(1e30):.2f}"
    assert formatted.endswith(".00")
    assert len(formatted) == 34
