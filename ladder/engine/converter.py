"""
Generic unit converter over a single ordered ladder.

A ``UnitConverter`` owns an append-only list of ``UnitDefinition`` rungs.
Absolute scales are never stored; they are resolved from the current list on
every request, so registering more rungs never invalidates anything.

Thread safety:
    Reads do not mutate state. When an instance is shared between threads,
    calls to ``register_unit`` must be serialized relative to reads by the
    caller.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Tuple, Union

from ..schema import (
    ComplexValueInput,
    ConversionResult,
    UnitDefinition,
    UnitLike,
    as_unit_system,
)
from .formatting import format_best as _format_best
from .resolver import resolve_absolute_scales, scale_ratio

logger = logging.getLogger(__name__)


class UnitNotFoundError(KeyError):
    """Raised when a conversion names a unit absent from the ladder."""

    def __init__(self, unit: str):
        super().__init__(unit)
        self.unit = unit

    def __str__(self) -> str:
        return f"Unit not found: {self.unit}"


class UnitConverter:
    """Convert and format magnitudes over an ordered unit ladder.

    Args:
        units: Optional initial ladder, registered as by ``register_unit``.

    Examples:
        >>> conv = UnitConverter([("Byte", 1), ("KB", 1024), ("MB", 1024)])
        >>> conv.convert_to(1024, "Byte", "KB")
        1.0
        >>> str(conv.format_best(1500))
        '1.46 KB'
    """

    def __init__(self, units: Optional[Iterable[UnitLike]] = None):
        self._units: List[UnitDefinition] = []
        if units is not None:
            self.register_unit(units)

    def register_unit(self, units: Iterable[UnitLike]) -> None:
        """Append rungs to the ladder in call-site order.

        Raises:
            ValueError: If a name is already registered or repeated within
                ``units``. Nothing is appended in that case.
            TypeError: If an item is not a ``UnitDefinition`` or pair.
        """
        new_units = as_unit_system(units)

        seen = {unit.name for unit in self._units}
        for unit in new_units:
            if unit.name in seen:
                raise ValueError(f"Unit '{unit.name}' is already registered.")
            seen.add(unit.name)

        self._units.extend(new_units)
        logger.debug(
            "Registered %d units; ladder now has %d", len(new_units), len(self._units)
        )

    def get_units(self) -> List[UnitDefinition]:
        """Return the registered ladder in stored (relative multiplier) form."""
        return list(self._units)

    def resolve(self) -> List[Tuple[str, float]]:
        """Return ``(name, absolute_scale)`` pairs for the registered ladder."""
        return resolve_absolute_scales(self._units)

    def convert_to(self, magnitude: float, from_unit: str, to_unit: str) -> float:
        """Convert ``magnitude`` from ``from_unit`` to ``to_unit``.

        Args:
            magnitude: Value expressed in ``from_unit``.
            from_unit: Exact name of the source unit.
            to_unit: Exact name of the target unit.

        Returns:
            float: ``magnitude * scale[from_unit] / scale[to_unit]``, unrounded.

        Raises:
            UnitNotFoundError: If either unit is not registered. ``from_unit``
                is checked first.
        """
        scales: Dict[str, float] = dict(self.resolve())
        if from_unit not in scales:
            raise UnitNotFoundError(from_unit)
        if to_unit not in scales:
            raise UnitNotFoundError(to_unit)

        if from_unit == to_unit:
            return float(magnitude)

        result = scale_ratio(float(magnitude) * scales[from_unit], scales[to_unit])
        logger.debug("Converted %s %s -> %s %s", magnitude, from_unit, result, to_unit)
        return result

    def format_best(
        self,
        value: Union[float, ComplexValueInput],
        units: Optional[Iterable[UnitLike]] = None,
    ) -> ConversionResult:
        """Express a magnitude in its most readable unit.

        Args:
            value: Either a plain magnitude in base units, or a
                ``ComplexValueInput`` carrying its own ladder.
            units: Ladder overriding the registered one for this call only.
                An explicitly empty ladder is honoured (passthrough result).

        Returns:
            ConversionResult: Best-unit magnitude and name.

        Raises:
            TypeError: If ``units`` is given together with a
                ``ComplexValueInput``.
        """
        if isinstance(value, ComplexValueInput):
            if units is not None:
                raise TypeError(
                    "Pass units either inside ComplexValueInput or as an argument, not both."
                )
            return _format_best(value.magnitude, value.units)

        ladder = self._units if units is None else units
        return _format_best(value, ladder)
