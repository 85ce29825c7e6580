"""
Conversion engine for ordered unit ladders.

Modules:
    resolver:
        Prefix-product resolution of relative multipliers into absolute
        scales. Pure functions; called fresh on every request.

    formatting:
        Best-unit selection (largest rung not exceeding the magnitude) and
        normalization of the displayed quotient.

    converter:
        ``UnitConverter``, the append-only unit registry with any-to-any
        conversion and best-unit formatting on top of the two modules above.

Design Principle:
    This subpackage has no dependency on pandas or on the domain presets.
    Presets are plain data passed to ``UnitConverter``.
"""

from .converter import UnitConverter, UnitNotFoundError
from .formatting import format_best, normalize_quotient, select_best_unit
from .resolver import resolve_absolute_scales, scale_ratio

__all__ = [
    "UnitConverter",
    "UnitNotFoundError",
    "format_best",
    "normalize_quotient",
    "select_best_unit",
    "resolve_absolute_scales",
    "scale_ratio",
]
