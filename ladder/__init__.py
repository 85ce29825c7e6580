"""
A Python package for converting magnitudes along ordered unit ladders.

Converts values between named units of a user-defined ladder and picks the
most readable unit for display (e.g. ``1500`` bytes as ``1.46 KB``).

Modules:
    - schema: Unit definitions, inputs, results and table column labels.
    - engine: Scale resolution, conversion and best-unit formatting.
    - units: Preset ladders for capacity, distance and power.
    - reporting: pandas tables for ladders and best-unit columns.
"""

__version__ = "1.0.0"

from .engine import (
    UnitConverter,
    UnitNotFoundError,
    format_best,
    resolve_absolute_scales,
)
from .reporting import add_best_unit_columns, unit_ladder_table
from .schema import ComplexValueInput, ConversionResult, UnitDefinition
from .units import (
    COMPUTER_CAPACITY_UNITS,
    DISTANCE_UNITS,
    POWER_CAPACITY_UNITS,
    POWER_USAGE_UNITS,
    PRESETS,
    computer_capacity_converter,
    converter_for,
    distance_converter,
    power_capacity_converter,
    power_usage_converter,
)

__all__ = [
    # Data model
    "UnitDefinition",
    "ComplexValueInput",
    "ConversionResult",
    # Engine
    "UnitConverter",
    "UnitNotFoundError",
    "resolve_absolute_scales",
    "format_best",
    # Presets
    "COMPUTER_CAPACITY_UNITS",
    "DISTANCE_UNITS",
    "POWER_CAPACITY_UNITS",
    "POWER_USAGE_UNITS",
    "PRESETS",
    "converter_for",
    "computer_capacity_converter",
    "distance_converter",
    "power_capacity_converter",
    "power_usage_converter",
    # Reporting
    "unit_ladder_table",
    "add_best_unit_columns",
]
