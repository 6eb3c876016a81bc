"""
Exact rational helpers.

Quantities are `fractions.Fraction` values, always in lowest terms with a
positive denominator. Nothing in here goes through float arithmetic.
"""

import math
import re
from decimal import Decimal, InvalidOperation
from fractions import Fraction
from typing import Optional, Union

RationalLike = Union[int, float, str, Decimal, Fraction]

_FRACTION_TEXT = re.compile(r'^\s*(\d+)\s*/\s*(\d+)\s*$')


def multiply(a: Fraction, b: Fraction) -> Fraction:
    """Multiply two rationals, reducing across operands before multiplying."""
    g1 = math.gcd(a.numerator, b.denominator)
    g2 = math.gcd(b.numerator, a.denominator)
    num = (a.numerator // g1) * (b.numerator // g2)
    den = (a.denominator // g2) * (b.denominator // g1)
    return Fraction(num, den)


# Bounds for textual / decimal factors; anything past them is not a recipe scale
MAX_FACTOR_TEXT_LENGTH = 64
MAX_FACTOR_EXPONENT = 6


def _decimal_to_rational(dec: Decimal) -> Optional[Fraction]:
    if not dec.is_finite():
        return None
    if len(dec.as_tuple().digits) > MAX_FACTOR_TEXT_LENGTH:
        return None
    if dec.is_zero():
        return Fraction(0)
    if abs(dec.adjusted()) > MAX_FACTOR_EXPONENT:
        return None
    return Fraction(dec)


def to_rational(value: RationalLike) -> Optional[Fraction]:
    """
    Coerce a scale factor to an exact Fraction.
    Returns None when the value has no finite rational meaning, or is too
    large or too small in magnitude to be a scale factor.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, Fraction):
        return value
    if isinstance(value, int):
        return Fraction(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        # repr gives the shortest round-tripping text, so 0.1 -> 1/10
        return _decimal_to_rational(Decimal(repr(value)))
    if isinstance(value, Decimal):
        return _decimal_to_rational(value)
    if isinstance(value, str):
        if len(value) > MAX_FACTOR_TEXT_LENGTH:
            return None
        m = _FRACTION_TEXT.match(value)
        if m:
            den = int(m.group(2))
            if den == 0:
                return None
            return Fraction(int(m.group(1)), den)
        try:
            dec = Decimal(value.strip())
        except InvalidOperation:
            return None
        return _decimal_to_rational(dec)
    return None


def round_half_up(value: Fraction, places: int) -> Fraction:
    """Round a non-negative rational to `places` decimal places, halves going up."""
    scale = 10 ** places
    return Fraction(math.floor(value * scale + Fraction(1, 2)), scale)
