"""
Utility functions for transaction data normalization.

Provides helpers for:
- ISO date parsing and inclusive day bounds
- Paid amount normalization to a fixed two-decimal string
- Blank value handling for filter inputs
"""

from datetime import date, datetime, time
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Any

from gift_aid_ui.errors import DataShapeError

# Marker stored in place of an amount that could not be parsed
INVALID_AMOUNT = "NaN"

_CENTS = Decimal("0.01")


def is_blank(value: Any) -> bool:
    """Return True for None and whitespace-only strings."""
    return value is None or (isinstance(value, str) and not value.strip())


def parse_date(value: str | date | None) -> date | None:
    """
    Parse a 'YYYY-MM-DD' string into a date.

    Args:
        value: ISO date string, a date (returned unchanged) or None.

    Returns:
        date object, or None for blank input.

    Raises:
        ValueError: If the string is not a valid ISO calendar date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if is_blank(value):
        return None
    return date.fromisoformat(value.strip())


def start_of_day(day: date) -> datetime:
    """Return the first instant of the given day."""
    return datetime.combine(day, time.min)


def end_of_day(day: date) -> datetime:
    """Return the last instant of the given day."""
    return datetime.combine(day, time.max)


def parse_amount(value: Any) -> Decimal:
    """
    Parse a raw paid amount.

    None and blank strings count as zero and booleans as 1 or 0. Floats
    keep their exact binary value, so 1.005 parses as 1.00499999...;
    strings and Decimals keep their decimal value.

    Raises:
        DataShapeError: If the value is not a finite number.
    """
    if is_blank(value):
        return Decimal(0)
    try:
        if isinstance(value, bool):
            amount = Decimal(int(value))
        elif isinstance(value, (int, float, Decimal)):
            amount = Decimal(value)
        elif isinstance(value, str):
            amount = Decimal(value.strip())
        else:
            raise DataShapeError(f"Unsupported amount type: {type(value).__name__}")
    except InvalidOperation as exc:
        raise DataShapeError(f"Non-numeric amount: {value!r}") from exc
    if not amount.is_finite():
        raise DataShapeError(f"Non-finite amount: {value!r}")
    return amount


def format_amount(value: Any) -> str:
    """
    Format a raw paid amount as a two-decimal string, rounding half-up.

    Rounding applies to the parsed value, so floats round the way
    Number.toFixed(2) does: 1.005 gives '1.00', 0.125 gives '0.13'.
    Amounts of any magnitude are written out in full.

    Returns:
        String like '12.50', or INVALID_AMOUNT when the value is not numeric.
    """
    try:
        amount = parse_amount(value)
        with localcontext() as ctx:
            ctx.prec = max(ctx.prec, amount.adjusted() + 4)
            return str(amount.quantize(_CENTS, rounding=ROUND_HALF_UP))
    except (DataShapeError, InvalidOperation):
        return INVALID_AMOUNT
