from decimal import Decimal

import pytest

from app.services.price_mapping_repository import compute_unit_price
from app.services.unit_value import extract_unit_value


@pytest.mark.parametrize("unit_value, expected", [
    ("500 g", Decimal("500")),
    ("1.5 L", Decimal("1.5")),
    ("12 x 330 ml", Decimal("12")),
    ("pack of 6", Decimal("6")),
])
def test_extracts_first_number(unit_value, expected):
    assert extract_unit_value(unit_value) == expected


@pytest.mark.parametrize("unit_value", [None, "", "piece", "0 g", "0.0 kg"])
def test_defaults_to_one(unit_value):
    assert extract_unit_value(unit_value) == Decimal("1")


def test_comma_is_not_a_decimal_separator():
    assert extract_unit_value("1,5 L") == Decimal("1")


def test_unit_price_per_gram():
    assert compute_unit_price(Decimal("20.00"), "500 g") == Decimal("0.04")
    assert compute_unit_price(Decimal("18.00"), "500 g") == Decimal("0.036")


def test_unit_price_without_magnitude_is_the_price():
    assert compute_unit_price(Decimal("7.50"), "piece") == Decimal("7.50")
