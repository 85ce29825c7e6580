"""Best-unit selection and display normalization."""

from __future__ import annotations

import math
from typing import Iterable, List, Sequence, Tuple, Union

from ..schema import ConversionResult, UnitLike
from .resolver import resolve_absolute_scales, scale_ratio

DEFAULT_DECIMALS = 2


def select_best_unit(
    resolved: Sequence[Tuple[str, float]], magnitude: float
) -> Tuple[str, float]:
    """Pick the largest rung whose absolute scale does not exceed ``|magnitude|``.

    The scan runs from the last rung to the first in ladder order; the
    first rung is returned when nothing fits.

    Args:
        resolved: Output of ``resolve_absolute_scales``. Must be non-empty.
        magnitude: Value expressed in base units.

    Returns:
        tuple[str, float]: Selected ``(name, absolute_scale)``.

    Raises:
        ValueError: If ``resolved`` is empty.
    """
    if not resolved:
        raise ValueError("Cannot select a unit from an empty ladder.")

    size = abs(float(magnitude))
    for name, scale in reversed(resolved):
        if scale <= size:
            return name, scale
    return resolved[0]


def normalize_quotient(
    quotient: float, decimals: int = DEFAULT_DECIMALS
) -> Union[int, float]:
    """Return whole quotients as ``int``, others rounded to ``decimals`` places."""
    q = float(quotient)
    if math.isfinite(q) and q.is_integer():
        return int(q)
    return round(q, decimals)


def format_best(magnitude: float, units: Iterable[UnitLike]) -> ConversionResult:
    """Express ``magnitude`` in the most readable unit of ``units``.

    Args:
        magnitude: Value in base units of the ladder.
        units: Ordered ladder used for selection.

    Returns:
        ConversionResult: Normalized magnitude and unit name. An empty ladder
        passes ``magnitude`` through unchanged with an empty unit name.

    Examples:
        With Byte=1, KB=x1024, MB=x1024, ``1500`` gives ``1.46 KB`` and
        ``1048576`` gives ``1 MB``.
    """
    resolved: List[Tuple[str, float]] = resolve_absolute_scales(units)
    if not resolved:
        return ConversionResult(magnitude, "")

    name, scale = select_best_unit(resolved, magnitude)
    return ConversionResult(normalize_quotient(scale_ratio(magnitude, scale)), name)
