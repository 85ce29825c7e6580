"""Centralized unit ladders for common domains.

Each preset is an ordered table of ``(name, relative_multiplier)`` pairs:
the first rung is the base unit (scale 1) and every later rung is a multiple
of the one before it.
"""

from __future__ import annotations

from typing import Dict, Tuple

from .engine.converter import UnitConverter
from .schema import UnitDefinition

BYTES_PER_STEP: int = 1024
SI_STEP: int = 1000

COMPUTER_CAPACITY_UNITS: Tuple[UnitDefinition, ...] = (
    UnitDefinition("Byte", 1),
    *(
        UnitDefinition(name, BYTES_PER_STEP)
        for name in ("KB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB")
    ),
)

DISTANCE_UNITS: Tuple[UnitDefinition, ...] = (
    UnitDefinition("mm", 1),
    UnitDefinition("cm", 10),  # 1 cm = 10 mm
    UnitDefinition("m", 100),  # 1 m = 100 cm
    UnitDefinition("km", 1000),  # 1 km = 1000 m
)

POWER_CAPACITY_UNITS: Tuple[UnitDefinition, ...] = (
    UnitDefinition("W", 1),
    *(UnitDefinition(name, SI_STEP) for name in ("kW", "MW", "GW", "TW")),
)

POWER_USAGE_UNITS: Tuple[UnitDefinition, ...] = (
    UnitDefinition("Wh", 1),
    *(UnitDefinition(name, SI_STEP) for name in ("kWh", "MWh", "GWh", "TWh")),
)

PRESETS: Dict[str, Tuple[UnitDefinition, ...]] = {
    "computer_capacity": COMPUTER_CAPACITY_UNITS,
    "distance": DISTANCE_UNITS,
    "power_capacity": POWER_CAPACITY_UNITS,
    "power_usage": POWER_USAGE_UNITS,
}


def converter_for(preset: str) -> UnitConverter:
    """Build a ``UnitConverter`` preloaded with a named preset ladder.

    Args:
        preset (str): One of the keys of ``PRESETS``.

    Returns:
        UnitConverter: New converter owning its own copy of the ladder.

    Raises:
        KeyError: If ``preset`` is not a known preset name.
    """
    units = PRESETS.get(preset)
    if units is None:
        raise KeyError(
            f"No preset ladder named '{preset}'. Available: {sorted(PRESETS)}"
        )
    return UnitConverter(units)


def computer_capacity_converter() -> UnitConverter:
    return converter_for("computer_capacity")


def distance_converter() -> UnitConverter:
    return converter_for("distance")


def power_capacity_converter() -> UnitConverter:
    return converter_for("power_capacity")


def power_usage_converter() -> UnitConverter:
    return converter_for("power_usage")
