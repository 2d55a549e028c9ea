"""
Unit tests: monetary codec.
"""
from decimal import Decimal

import pytest

from app.core.exceptions import EncodingError
from app.core.money import from_storage, to_storage


@pytest.mark.parametrize(
    "price, stored",
    [
        (3.25, "3.25"),
        (19.99, "19.99"),
        (25.5, "25.50"),
        (7, "7.00"),
        (0.1, "0.10"),
        (1234567.89, "1234567.89"),
    ],
)
def test_to_storage_formats_two_digits(price, stored):
    assert to_storage(price) == stored


@pytest.mark.parametrize("price", [3.25, 19.99, 15.99, 25.5, 0.01, 0.1, 99999999.99])
def test_round_trip_is_exact(price):
    assert from_storage(to_storage(price)) == price


def test_rounds_half_away_from_zero():
    assert to_storage(2.675) == "2.68"
    assert to_storage(1.005) == "1.01"
    assert to_storage(1.004) == "1.00"
    assert to_storage(19.999) == "20.00"


def test_to_storage_accepts_decimal():
    assert to_storage(Decimal("4.125")) == "4.13"


@pytest.mark.parametrize("bad", [-1, -0.01, float("inf"), float("-inf"), float("nan")])
def test_to_storage_rejects_negative_and_non_finite(bad):
    with pytest.raises(EncodingError):
        to_storage(bad)


@pytest.mark.parametrize("bad", ["3.25", None, True])
def test_to_storage_rejects_non_numbers(bad):
    with pytest.raises(EncodingError):
        to_storage(bad)


def test_from_storage_parses_decimal_and_string():
    assert from_storage("15.99") == 15.99
    assert from_storage(Decimal("15.99")) == 15.99
    assert isinstance(from_storage("15.99"), float)


@pytest.mark.parametrize("bad", ["abc", "", "NaN", "Infinity", 3.25])
def test_from_storage_rejects_garbage(bad):
    with pytest.raises(EncodingError):
        from_storage(bad)


@pytest.mark.parametrize("bad", [1e30, 1e300, Decimal("1E+40"), 100000000, 99999999.999])
def test_to_storage_rejects_values_beyond_numeric_10_2(bad):
    with pytest.raises(EncodingError):
        to_storage(bad)


def test_largest_storable_price_round_trips():
    assert to_storage(99999999.99) == "99999999.99"
    assert from_storage(to_storage(99999999.99)) == 99999999.99
