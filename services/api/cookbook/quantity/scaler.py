"""Exact scaling of parsed ingredient amounts."""

import logging
from fractions import Fraction
from typing import Optional

from .formatter import format_quantity
from .parser import parse
from .rational import RationalLike, multiply, round_half_up, to_rational
from .types import Exact, ParsedQuantity, Range
from ..settings import settings

logger = logging.getLogger("cookbook.quantity")


def _valid_factor(factor: RationalLike) -> Optional[Fraction]:
    ratio = to_rational(factor)
    if ratio is None or ratio <= 0:
        logger.warning("Ignoring invalid scale factor %r", factor)
        return None
    return ratio


def scale(q: ParsedQuantity, factor: RationalLike) -> ParsedQuantity:
    """
    Multiply a parsed amount by a positive factor.

    Opaque amounts pass through untouched. A factor that is not a finite
    positive number leaves the amount unchanged instead of raising.
    """
    ratio = _valid_factor(factor)
    if ratio is None:
        return q

    if isinstance(q, Exact):
        return Exact(multiply(q.value, ratio))
    if isinstance(q, Range):
        return Range(multiply(q.low, ratio), multiply(q.high, ratio))
    return q


def scale_amount(raw: str, factor: RationalLike) -> str:
    """Parse, scale and re-render an amount string in one step."""
    return format_quantity(scale(parse(raw), factor))


def scale_servings(servings: Optional[int], factor: RationalLike, default: Optional[int] = None) -> int:
    """
    Servings shown next to a scaled recipe.
    Missing (or zero) servings fall back to `default`, or the configured
    default_servings; the result is rounded half up.
    """
    base = servings or default or settings.default_servings
    ratio = _valid_factor(factor) or Fraction(1)
    return int(round_half_up(multiply(Fraction(base), ratio), 0))
