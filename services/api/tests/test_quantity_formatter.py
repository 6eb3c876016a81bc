from fractions import Fraction

import pytest

from cookbook.quantity import format_quantity, Exact, Range, Opaque
from cookbook.quantity.formatter import nearest_culinary_fraction


@pytest.mark.parametrize("value,expected", [
    (Fraction(0), "0"),
    (Fraction(3), "3"),
    (Fraction(1, 2), "1/2"),
    (Fraction(3, 4), "3/4"),
    (Fraction(3, 2), "1 1/2"),
    (Fraction(7, 3), "2 1/3"),
    (Fraction(5, 3), "1 2/3"),
    (Fraction(3, 8), "3/8"),
    (Fraction(13, 8), "1 5/8"),
    (Fraction(15, 8), "1 7/8"),
    (Fraction(1, 8), "1/8"),
])
def test_culinary_fractions(value, expected):
    assert format_quantity(Exact(value)) == expected

def test_snaps_to_nearest_fraction_within_tolerance():
    # 0.49 is within 1/64 of 1/2
    assert format_quantity(Exact(Fraction(49, 100))) == "1/2"
    assert format_quantity(Exact(Fraction(251, 100))) == "2 1/2"

@pytest.mark.parametrize("value,expected", [
    (Fraction(3, 10), "0.3"),
    (Fraction(127, 100), "1.27"),
    (Fraction(1, 5), "0.2"),
    (Fraction(1, 6), "0.17"),
    (Fraction(2001, 1000), "2"),
    (Fraction(1999, 1000), "2"),
    (Fraction(1, 1000), "0"),
])
def test_decimal_fallback(value, expected):
    assert format_quantity(Exact(value)) == expected

def test_no_unreduced_or_unit_denominators():
    out = format_quantity(Exact(Fraction(4, 8)))
    assert out == "1/2"
    assert "/1" not in format_quantity(Exact(Fraction(6, 3)))

def test_no_plus_or_exponent_for_large_values():
    out = format_quantity(Exact(Fraction(10 ** 25, 3)))
    assert "e" not in out.lower()
    assert not out.startswith("+")
    assert out.endswith(" 1/3")

def test_negative_values_keep_sign():
    assert format_quantity(Exact(Fraction(-3, 2))) == "-1 1/2"

def test_range():
    assert format_quantity(Range(Fraction(1, 2), Fraction(3, 4))) == "1/2-3/4"
    assert format_quantity(Range(Fraction(4), Fraction(6))) == "4-6"

def test_opaque_text_unchanged():
    assert format_quantity(Opaque("a pinch")) == "a pinch"
    assert format_quantity(Opaque("")) == ""

def test_nearest_culinary_fraction():
    assert nearest_culinary_fraction(Fraction(1, 3)) == Fraction(1, 3)
    assert nearest_culinary_fraction(Fraction(33, 100)) == Fraction(1, 3)
    assert nearest_culinary_fraction(Fraction(1, 5)) is None

@pytest.mark.parametrize("value,expected", [
    (Fraction(1, 7), "1/8"),            # rounds to 0.14, inside 1/8's band
    (Fraction(359, 1000), "3/8"),       # rounds to 0.36
    (Fraction(1359, 1000), "1 3/8"),
    (Fraction(17, 100), "0.17"),
])
def test_rounded_decimal_snaps_to_fraction_band(value, expected):
    assert format_quantity(Exact(value)) == expected
