"""
Lexical parser for free-form ingredient amounts.

Turns strings like "1 1/2", "3/4", "1½", "1.25" or "2-3" into a tagged
ParsedQuantity. Anything else ("a pinch", "to taste", "") comes back as
Opaque with the trimmed input text. parse() never raises.
"""

import logging
import re
from fractions import Fraction
from typing import Optional

from .types import Exact, Opaque, ParsedQuantity, Range

logger = logging.getLogger("cookbook.quantity")

# Glyph -> (numerator, denominator)
UNICODE_FRACTIONS = {
    "½": (1, 2),
    "⅓": (1, 3),
    "⅔": (2, 3),
    "¼": (1, 4),
    "¾": (3, 4),
    "⅕": (1, 5),
    "⅖": (2, 5),
    "⅗": (3, 5),
    "⅘": (4, 5),
    "⅙": (1, 6),
    "⅚": (5, 6),
    "⅐": (1, 7),
    "⅛": (1, 8),
    "⅜": (3, 8),
    "⅝": (5, 8),
    "⅞": (7, 8),
    "⅑": (1, 9),
    "⅒": (1, 10),
}

# Amounts longer than this are never numeric in a recipe
MAX_NUMERIC_LENGTH = 64

_MIXED = re.compile(r'^(\d+) (\d+)/(\d+)$')
_FRACTION = re.compile(r'^(\d+)/(\d+)$')
_GLYPH = re.compile(r'^(\d+)? ?([' + "".join(UNICODE_FRACTIONS) + r'])$')
_DECIMAL = re.compile(r'^(?:(\d+)(?:\.(\d*))?|\.(\d+))$')
_RANGE = re.compile(r'^(.+?)(?: ?[-–—] ?| to )(.+)$', re.IGNORECASE)


def normalize_amount_text(raw: str) -> str:
    """Collapse whitespace and map fraction/division slashes to '/'."""
    s = raw.replace("⁄", "/").replace("∕", "/")
    return re.sub(r'\s+', ' ', s).strip()


def _ratio(num: str, den: str, whole: Optional[str] = None) -> Optional[Fraction]:
    d = int(den)
    if d == 0:
        return None
    value = Fraction(int(num), d)
    if whole is not None:
        value += int(whole)
    return value


def _parse_number(text: str) -> Optional[Fraction]:
    """Single amount, trying mixed, fraction, glyph then decimal forms."""
    m = _MIXED.match(text)
    if m:
        return _ratio(m.group(2), m.group(3), whole=m.group(1))

    m = _FRACTION.match(text)
    if m:
        return _ratio(m.group(1), m.group(2))

    m = _GLYPH.match(text)
    if m:
        num, den = UNICODE_FRACTIONS[m.group(2)]
        value = Fraction(num, den)
        if m.group(1):
            value += int(m.group(1))
        return value

    m = _DECIMAL.match(text)
    if m:
        whole = m.group(1) or "0"
        digits = m.group(2) if m.group(1) is not None else m.group(3)
        digits = digits or ""
        return Fraction(int(whole + digits), 10 ** len(digits))

    return None


def parse(raw: str) -> ParsedQuantity:
    """Parse an ingredient amount into Exact, Range or Opaque."""
    if raw is None:
        return Opaque("")
    if not isinstance(raw, str):
        raw = str(raw)

    trimmed = raw.strip()
    text = normalize_amount_text(raw)
    if not text or len(text) > MAX_NUMERIC_LENGTH:
        return Opaque(trimmed)

    value = _parse_number(text)
    if value is not None:
        return Exact(value)

    m = _RANGE.match(text)
    if m:
        low = _parse_number(m.group(1).strip())
        high = _parse_number(m.group(2).strip())
        if low is not None and high is not None:
            return Range(low, high)

    logger.debug("Amount %r is not numeric, keeping as text", trimmed)
    return Opaque(trimmed)
