from .types import Exact, Range, Opaque, ParsedQuantity, kind_of, numeric_value
from .parser import parse
from .scaler import scale, scale_amount, scale_servings
from .formatter import format_quantity
from .units import abbreviate

__all__ = [
    "Exact", "Range", "Opaque", "ParsedQuantity", "kind_of", "numeric_value",
    "parse", "scale", "scale_amount", "scale_servings", "format_quantity", "abbreviate",
]
