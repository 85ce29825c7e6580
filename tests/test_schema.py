"""Test the data model and unit-system coercion."""

import dataclasses

import pytest

from ladder.schema import (
    ConversionResult,
    LadderColumns,
    UnitDefinition,
    as_unit_definition,
    as_unit_system,
)


class TestConversionResultDisplay:
    """``str(result)`` matches the human-readable display form."""

    def test_integer_magnitude(self):
        assert str(ConversionResult(1, "MB")) == "1 MB"

    def test_fractional_magnitude_shows_two_decimals(self):
        assert str(ConversionResult(1.46, "KB")) == "1.46 KB"
        assert str(ConversionResult(2.5, "km")) == "2.50 km"

    def test_untagged_passthrough(self):
        assert str(ConversionResult(1500, "")) == "1500"

    def test_is_frozen(self):
        result = ConversionResult(1, "MB")
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.unit = "KB"  # type: ignore


class TestUnitSystemCoercion:
    """Pairs and definitions are both accepted, order kept."""

    def test_pairs(self):
        assert as_unit_system([("mm", 1), ("cm", 10)]) == [
            UnitDefinition("mm", 1.0),
            UnitDefinition("cm", 10.0),
        ]

    def test_definitions_pass_through(self):
        unit = UnitDefinition("W", 1)
        assert as_unit_definition(unit) is unit

    def test_generator_input(self):
        units = as_unit_system((name, 10) for name in ("a", "b"))
        assert [u.name for u in units] == ["a", "b"]

    def test_non_string_name(self):
        with pytest.raises(TypeError, match="must be a string"):
            as_unit_definition((1, 10))

    def test_scalar_rejected(self):
        with pytest.raises(TypeError, match="Expected UnitDefinition"):
            as_unit_definition(5)


def test_ladder_columns_defaults():
    cols = LadderColumns()
    assert (cols.unit, cols.relative, cols.absolute) == (
        "Unit",
        "Relative Multiplier",
        "Absolute Scale",
    )
