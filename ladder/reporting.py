"""Render unit ladders and best-unit magnitudes as pandas tables.

This module sits after the conversion engine: it never changes numeric
columns, it only adds human-readable companions next to them.
"""

from __future__ import annotations

from typing import Iterable, List

import numpy as np
import pandas as pd

from .engine.formatting import format_best
from .engine.resolver import resolve_absolute_scales
from .schema import LadderColumns, UnitDefinition, UnitLike, as_unit_system

COLUMNS = LadderColumns()


def unit_ladder_table(units: Iterable[UnitLike]) -> pd.DataFrame:
    """Tabulate a ladder with both stored and resolved scales.

    Args:
        units (Iterable[UnitLike]): Ordered ladder.

    Returns:
        pandas.DataFrame: One row per rung, in ladder order, with columns
        ``Unit``, ``Relative Multiplier`` and ``Absolute Scale``.
    """
    ladder: List[UnitDefinition] = as_unit_system(units)
    resolved = resolve_absolute_scales(ladder)
    return pd.DataFrame(
        {
            COLUMNS.unit: [unit.name for unit in ladder],
            COLUMNS.relative: [float(unit.relative_multiplier) for unit in ladder],
            COLUMNS.absolute: [scale for _, scale in resolved],
        },
        columns=[COLUMNS.unit, COLUMNS.relative, COLUMNS.absolute],
    )


def add_best_unit_columns(
    df: pd.DataFrame,
    value_cols: Iterable[str],
    units: Iterable[UnitLike],
    suffix: str = " (reported)",
) -> pd.DataFrame:
    """Add best-unit magnitude, unit and display columns for value columns.

    For each ``col`` in ``value_cols`` three columns are added:
    ``f"{col} (best value)"``, ``f"{col} (best unit)"`` and
    ``f"{col}{suffix}"`` (e.g. ``"1.46 KB"``).

    Args:
        df (pandas.DataFrame): Table with magnitudes in the ladder's base unit.
        value_cols (Iterable[str]): Columns to format.
        units (Iterable[UnitLike]): Ladder used for every column.
        suffix (str, optional): Suffix of the display column.
            Defaults to ``" (reported)"``.

    Returns:
        pandas.DataFrame: Copy of ``df`` with the new columns added.

    Raises:
        KeyError: If a value column is missing.

    Note:
        Missing or non-numeric entries produce ``NaN`` and empty strings
        rather than errors. Original numeric columns are preserved.
    """
    ladder = as_unit_system(units)
    value_cols = list(value_cols)
    for value_col in value_cols:
        if value_col not in df.columns:
            raise KeyError(f"Missing value column '{value_col}' for best-unit format.")

    out = df.copy()
    for value_col in value_cols:
        values = pd.to_numeric(out[value_col], errors="coerce")
        best_values = []
        best_units = []
        reported = []
        for v in values:
            if not np.isfinite(v):
                best_values.append(np.nan)
                best_units.append("")
                reported.append("")
                continue
            result = format_best(float(v), ladder)
            best_values.append(float(result.magnitude))
            best_units.append(result.unit)
            reported.append(str(result))

        out[f"{value_col} (best value)"] = best_values
        out[f"{value_col} (best unit)"] = best_units
        out[f"{value_col}{suffix}"] = reported

    return out
