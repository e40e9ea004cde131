"""
Numeric input parsing.

Money and percentages arrive as JSON numbers, form strings or spreadsheet
cells. All of them go through parse_decimal so there is one policy:
strings are stripped, and a comma is read as the decimal separator only
when the string contains no period ("12,50" -> 12.50).
"""

import math
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Optional

MONEY_QUANT = Decimal("0.01")
UNIT_PRICE_QUANT = Decimal("0.000001")

# Largest amount a Numeric(12, 2) column holds
MAX_MONEY = Decimal("9999999999.99")

_TRUE_VALUES = {"true", "yes", "y", "1", "evet"}
_FALSE_VALUES = {"false", "no", "n", "0", "hayir", "hayır", ""}


def is_blank(value: Any) -> bool:
    """True for None, NaN and whitespace-only strings."""
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    if isinstance(value, str) and not value.strip():
        return True
    return False


def parse_decimal(value: Any, field: str = "value", max_value: Optional[Decimal] = None) -> Optional[Decimal]:
    """
    Convert user input to Decimal.

    Returns None for blank input. Raises ValueError for anything that is
    not a finite number, or whose magnitude is above max_value when given.
    """
    if is_blank(value):
        return None
    if isinstance(value, bool):
        raise ValueError(f"Invalid number for {field}: {value!r}")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        # repr gives the shortest round-tripping form (0.1 -> "0.1")
        result = Decimal(repr(value))
    else:
        text = str(value).strip()
        if "," in text and "." not in text and text.count(",") == 1:
            text = text.replace(",", ".")
        try:
            result = Decimal(text)
        except InvalidOperation:
            raise ValueError(f"Invalid number for {field}: {value!r}")

    if not result.is_finite():
        raise ValueError(f"Invalid number for {field}: {value!r}")
    if max_value is not None and abs(result) > max_value:
        raise ValueError(f"Number out of range for {field}: {value!r}")
    return result


def quantize_money(value: Decimal) -> Decimal:
    return value.quantize(MONEY_QUANT, rounding=ROUND_HALF_UP)


def quantize_unit_price(value: Decimal) -> Decimal:
    return value.quantize(UNIT_PRICE_QUANT, rounding=ROUND_HALF_UP)


def parse_bool(value: Any, default: bool = False) -> bool:
    """Interpret spreadsheet/form booleans ("yes", 1, True, "false" ...)."""
    if is_blank(value):
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float, Decimal)):
        return value != 0
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean value: {value!r}")
