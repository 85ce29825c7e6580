"""Resolve chained relative multipliers into absolute unit scales.

A ladder stores each rung as a multiplier relative to the rung before it, so
the absolute scale of rung ``i`` is the prefix product::

    scale[i] = m[0] * m[1] * ... * m[i]

For the ladder ``[("mm", 1), ("cm", 10), ("m", 100), ("km", 1000)]`` this
gives ``[1, 10, 1000, 1000000]``. Order is significant: swapping two rungs
changes every scale after them, so the ladder is never sorted.
"""

from __future__ import annotations

import warnings
from typing import Iterable, List, Tuple

import numpy as np

from ..schema import UnitLike, as_unit_system


def resolve_absolute_scales(units: Iterable[UnitLike]) -> List[Tuple[str, float]]:
    """Return ``(name, absolute_scale)`` pairs in ladder order.

    Args:
        units: Ordered ladder of ``UnitDefinition`` items or
            ``(name, multiplier)`` pairs.

    Returns:
        list[tuple[str, float]]: One entry per rung. Empty input gives an
        empty list.

    Note:
        Multipliers must be positive and finite for the scales to be
        monotonic. Other values are not corrected; a ``UserWarning`` is
        emitted and the derived scales are returned as-is.
    """
    ladder = as_unit_system(units)
    if not ladder:
        return []

    multipliers = np.asarray(
        [unit.relative_multiplier for unit in ladder], dtype=float
    )
    bad = ~np.isfinite(multipliers) | (multipliers <= 0)
    if bool(bad.any()):
        names = [ladder[i].name for i in np.flatnonzero(bad)]
        warnings.warn(
            f"Non-positive or non-finite multipliers for {names}; "
            f"resolved scales will not be monotonic.",
            UserWarning,
            stacklevel=2,
        )

    scales = np.cumprod(multipliers)
    return [(unit.name, float(scale)) for unit, scale in zip(ladder, scales)]


def scale_ratio(numerator: float, denominator: float) -> float:
    """Divide with IEEE semantics, so a zero scale yields ``inf``/``nan``."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.divide(float(numerator), float(denominator)))
