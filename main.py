#!/usr/bin/env python3
"""
Main script for demonstrating the unit-ladder converter.
"""

# Pipeline overview:
# 1) Build one converter per preset ladder.
# 2) Log the resolved absolute scale of every rung.
# 3) Format a handful of sample magnitudes in their best unit.
# 4) Convert between explicit units and report unknown-unit failures.

import logging
import os
import sys
import time

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import pandas as pd

from ladder.engine import UnitNotFoundError
from ladder.reporting import add_best_unit_columns, unit_ladder_table
from ladder.units import PRESETS, converter_for

SAMPLES = {
    "computer_capacity": [0, 512, 1500, 1048576, 5.5e12],
    "distance": [7, 100, 1000, 2_500_000],
    "power_capacity": [999, 1000, 1_250_000],
    "power_usage": [42, 3600, 7.2e9],
}


def main():
    """Main execution function."""

    start_time = time.time()
    logging.info("Initializing unit ladder demo for %d presets", len(PRESETS))

    for preset, units in PRESETS.items():
        converter = converter_for(preset)
        table = unit_ladder_table(units)
        logging.info("Preset '%s' ladder:\n%s", preset, table.to_string(index=False))

        samples = pd.DataFrame({"Magnitude": SAMPLES.get(preset, [])})
        report = add_best_unit_columns(samples, ["Magnitude"], units)
        for _, row in report.iterrows():
            logging.info(
                "  %s -> %s", row["Magnitude"], row["Magnitude (reported)"]
            )

        first, last = units[0].name, units[-1].name
        logging.info(
            "  1 %s = %s %s", last, converter.convert_to(1, last, first), first
        )

    converter = converter_for("computer_capacity")
    try:
        converter.convert_to(1, "Byte", "Fooz")
    except UnitNotFoundError as exc:
        logging.warning("Conversion failed: %s", exc)

    total_duration = time.time() - start_time
    logging.info(f"Total execution time: {total_duration:.2f} seconds")
    return 0


if __name__ == "__main__":
    sys.exit(main())
