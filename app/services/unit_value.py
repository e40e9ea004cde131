"""
Unit value parsing.
Turns a SKU's free-text unit value ("500 g", "1.5 L") into a magnitude.
"""

import re
from decimal import Decimal
from typing import Optional

_NUMBER_PATTERN = re.compile(r"(\d+(?:\.\d+)?)")

DEFAULT_UNIT_VALUE = Decimal("1")


def extract_unit_value(unit_value: Optional[str]) -> Decimal:
    """
    Return the first number found in unit_value.

    Falls back to 1 when there is no number (or the number is zero), so the
    result is always safe to divide by. Commas are not treated as decimal
    separators: "1,5 L" gives 1.

    >>> extract_unit_value("2 kg")
    Decimal('2')
    >>> extract_unit_value("kg")
    Decimal('1')
    """
    if not unit_value:
        return DEFAULT_UNIT_VALUE

    match = _NUMBER_PATTERN.search(str(unit_value))
    if not match:
        return DEFAULT_UNIT_VALUE

    magnitude = Decimal(match.group(1))
    if magnitude == 0:
        return DEFAULT_UNIT_VALUE
    return magnitude
