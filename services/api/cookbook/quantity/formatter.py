"""
Render parsed amounts back to short, cook-friendly strings.

Fractional parts snap to the nearest common kitchen fraction when one is
within tolerance ("1 1/2", "3/4"); otherwise a two-place decimal is used
("1.27"). Output never has a leading '+', an exponent, or a '/1'.
"""

from fractions import Fraction
from typing import Optional

from .rational import round_half_up
from .types import Exact, Opaque, ParsedQuantity, Range

CULINARY_FRACTIONS = (
    Fraction(1, 8),
    Fraction(1, 4),
    Fraction(1, 3),
    Fraction(3, 8),
    Fraction(1, 2),
    Fraction(5, 8),
    Fraction(2, 3),
    Fraction(3, 4),
    Fraction(7, 8),
)

FRACTION_TOLERANCE = Fraction(1, 64)
DECIMAL_PLACES = 2


def nearest_culinary_fraction(
    remainder: Fraction, tolerance: Fraction = FRACTION_TOLERANCE
) -> Optional[Fraction]:
    """Closest kitchen fraction to `remainder`, or None if none is within tolerance."""
    best = min(CULINARY_FRACTIONS, key=lambda c: abs(remainder - c))
    if abs(remainder - best) <= tolerance:
        return best
    return None


def _format_fraction(whole: int, frac: Fraction) -> str:
    text = f"{frac.numerator}/{frac.denominator}"
    if whole == 0:
        return text
    return f"{whole} {text}"


def _format_decimal(value: Fraction) -> str:
    rounded = round_half_up(value, DECIMAL_PLACES)
    whole = rounded.numerator // rounded.denominator
    remainder = rounded - whole
    if remainder == 0:
        return str(whole)

    # Rounded value inside a fraction's band ("0.14" ~ 1/8) renders as the fraction
    frac = nearest_culinary_fraction(remainder)
    if frac is not None:
        return _format_fraction(whole, frac)

    digits = int(remainder * 10 ** DECIMAL_PLACES)
    return f"{whole}.{digits:0{DECIMAL_PLACES}d}".rstrip("0")


def format_exact(value: Fraction) -> str:
    if value < 0:
        return "-" + format_exact(-value)
    if value.denominator == 1:
        return str(value.numerator)

    whole = value.numerator // value.denominator
    frac = nearest_culinary_fraction(value - whole)
    if frac is None:
        return _format_decimal(value)
    return _format_fraction(whole, frac)


def format_quantity(q: ParsedQuantity) -> str:
    if isinstance(q, Opaque):
        return q.text
    if isinstance(q, Range):
        return f"{format_exact(q.low)}-{format_exact(q.high)}"
    return format_exact(q.value)
