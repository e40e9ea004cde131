from decimal import Decimal

import pytest

from app.services.numeric import MAX_MONEY, parse_bool, parse_decimal, quantize_money


def test_parse_decimal_accepts_numbers_and_strings():
    assert parse_decimal(12) == Decimal("12")
    assert parse_decimal(0.1) == Decimal("0.1")
    assert parse_decimal(" 19.90 ") == Decimal("19.90")


def test_parse_decimal_comma_only_without_period():
    assert parse_decimal("12,50") == Decimal("12.50")
    with pytest.raises(ValueError):
        parse_decimal("1,234.50")


@pytest.mark.parametrize("value", [None, "", "   ", float("nan")])
def test_parse_decimal_blank_is_none(value):
    assert parse_decimal(value) is None


@pytest.mark.parametrize("value", ["abc", True, "inf", "NaN"])
def test_parse_decimal_rejects_non_numbers(value):
    with pytest.raises(ValueError):
        parse_decimal(value, "price")


def test_quantize_money_rounds_half_up():
    assert quantize_money(Decimal("2.345")) == Decimal("2.35")


def test_parse_bool():
    assert parse_bool("yes") is True
    assert parse_bool("Evet") is True
    assert parse_bool(0) is False
    assert parse_bool(None) is False
    assert parse_bool(None, default=True) is True
    with pytest.raises(ValueError):
        parse_bool("maybe")


def test_parse_decimal_rejects_values_above_max():
    assert parse_decimal("9999999999.99", "price", max_value=MAX_MONEY) == MAX_MONEY
    with pytest.raises(ValueError, match="out of range for price"):
        parse_decimal("1e30", "price", max_value=MAX_MONEY)
