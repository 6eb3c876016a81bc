"""Tagged result of parsing an ingredient amount.

Every amount is exactly one of:
- Exact: a single rational quantity ("1 1/2" -> 3/2)
- Range: two rational quantities ("2-3")
- Opaque: text with no numeric value ("a pinch"), kept verbatim
"""

from dataclasses import dataclass
from fractions import Fraction
from typing import Optional, Union


@dataclass(frozen=True)
class Exact:
    value: Fraction


@dataclass(frozen=True)
class Range:
    low: Fraction
    high: Fraction

    def __post_init__(self):
        # Keep low <= high regardless of how the text was written ("3-2")
        if self.low > self.high:
            low, high = self.high, self.low
            object.__setattr__(self, "low", low)
            object.__setattr__(self, "high", high)


@dataclass(frozen=True)
class Opaque:
    text: str


ParsedQuantity = Union[Exact, Range, Opaque]


def kind_of(q: ParsedQuantity) -> str:
    if isinstance(q, Exact):
        return "exact"
    if isinstance(q, Range):
        return "range"
    return "opaque"


def numeric_value(q: ParsedQuantity) -> Optional[Fraction]:
    """Comparable value: the amount of an Exact, the low end of a Range."""
    if isinstance(q, Exact):
        return q.value
    if isinstance(q, Range):
        return q.low
    return None
