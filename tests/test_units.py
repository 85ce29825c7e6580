"""Test the preset unit ladders."""

import pytest

from ladder.engine import UnitConverter
from ladder.schema import ConversionResult
from ladder.units import (
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


class TestPresetTables:
    """Preset ladders are plain ordered data."""

    def test_computer_capacity_rungs(self):
        names = [u.name for u in COMPUTER_CAPACITY_UNITS]
        assert names == ["Byte", "KB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB"]
        assert COMPUTER_CAPACITY_UNITS[0].relative_multiplier == 1
        assert all(u.relative_multiplier == 1024 for u in COMPUTER_CAPACITY_UNITS[1:])

    def test_distance_rungs(self):
        assert [(u.name, u.relative_multiplier) for u in DISTANCE_UNITS] == [
            ("mm", 1),
            ("cm", 10),
            ("m", 100),
            ("km", 1000),
        ]

    def test_power_rungs(self):
        assert [u.name for u in POWER_CAPACITY_UNITS] == ["W", "kW", "MW", "GW", "TW"]
        assert [u.name for u in POWER_USAGE_UNITS] == [
            "Wh",
            "kWh",
            "MWh",
            "GWh",
            "TWh",
        ]

    def test_presets_mapping(self):
        assert set(PRESETS) == {
            "computer_capacity",
            "distance",
            "power_capacity",
            "power_usage",
        }


class TestPresetConverters:
    """Factories build independent generic converters."""

    def test_factories_return_generic_converter(self):
        for factory in (
            computer_capacity_converter,
            distance_converter,
            power_capacity_converter,
            power_usage_converter,
        ):
            assert type(factory()) is UnitConverter

    def test_yottabyte_scale(self):
        conv = computer_capacity_converter()
        assert conv.convert_to(1, "YB", "Byte") == 1024**8

    def test_kilometre(self):
        conv = distance_converter()
        assert conv.convert_to(1, "km", "mm") == 1_000_000
        assert conv.format_best(2_500_000) == ConversionResult(2.5, "km")

    def test_power_capacity(self):
        conv = power_capacity_converter()
        assert conv.format_best(1_250_000) == ConversionResult(1.25, "MW")
        assert conv.format_best(999) == ConversionResult(999, "W")

    def test_power_usage(self):
        conv = power_usage_converter()
        assert conv.convert_to(3, "GWh", "kWh") == 3_000_000
        assert str(conv.format_best(3600)) == "3.60 kWh"

    def test_converters_do_not_share_state(self):
        first = converter_for("distance")
        second = converter_for("distance")
        first.register_unit([("Mm", 1000)])
        assert len(first.get_units()) == 5
        assert len(second.get_units()) == 4
        assert len(DISTANCE_UNITS) == 4

    def test_unknown_preset(self):
        with pytest.raises(KeyError, match="No preset ladder named 'volume'"):
            converter_for("volume")
