"""Define the unit-ladder data model and standardized table column names."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple, Union

UnitLike = Union["UnitDefinition", Tuple[str, float]]


@dataclass(frozen=True)
class UnitDefinition:
    """One rung of an ordered unit ladder.

    Attributes:
        name: Unit label, matched exactly on lookup (e.g. ``"KB"``).
        relative_multiplier: For the first rung of a ladder, the unit's
            absolute scale in terms of the implicit base unit. For every later
            rung, the factor by which this unit is larger than the rung
            immediately before it.

    Note:
        Multipliers are expected to be positive and finite. Other values are
        accepted and produce mathematically derived (but meaningless) scales.
    """

    name: str
    relative_multiplier: float


@dataclass(frozen=True)
class ComplexValueInput:
    """A magnitude bundled with the ladder it should be expressed in."""

    magnitude: float
    units: Sequence[UnitLike]


@dataclass(frozen=True)
class ConversionResult:
    """Normalized best-unit output.

    Attributes:
        magnitude: ``int`` when the quotient was a whole number, otherwise a
            float rounded to two decimal places.
        unit: Selected unit name, or ``""`` when the ladder was empty.
    """

    magnitude: Union[int, float]
    unit: str

    def __str__(self) -> str:
        if (
            self.unit
            and isinstance(self.magnitude, float)
            and math.isfinite(self.magnitude)
        ):
            text = f"{self.magnitude:.2f}"
        else:
            text = f"{self.magnitude}"
        return f"{text} {self.unit}".strip()


@dataclass(frozen=True)
class LadderColumns:
    """Container for standardized ladder-table column labels.

    Attributes:
        unit: Column holding the unit name of each rung.
        relative: Column holding the multiplier relative to the previous rung
            (the stored form).
        absolute: Column holding the resolved absolute scale, i.e. the
            cumulative product of relative multipliers up to that rung.
    """

    unit: str = "Unit"
    relative: str = "Relative Multiplier"
    absolute: str = "Absolute Scale"


def as_unit_definition(item: UnitLike) -> UnitDefinition:
    """Coerce a ``UnitDefinition`` or ``(name, multiplier)`` pair.

    Raises:
        TypeError: If ``item`` is neither form.
    """
    if isinstance(item, UnitDefinition):
        return item
    if isinstance(item, (tuple, list)) and len(item) == 2:
        name, multiplier = item
        if not isinstance(name, str):
            raise TypeError(f"Unit name must be a string, got {type(name)}")
        return UnitDefinition(name, float(multiplier))
    raise TypeError(
        f"Expected UnitDefinition or (name, multiplier) pair, got {item!r}"
    )


def as_unit_system(units: Iterable[UnitLike]) -> List[UnitDefinition]:
    """Return ``units`` as a list of ``UnitDefinition`` in the given order."""
    return [as_unit_definition(item) for item in units]
