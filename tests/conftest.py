"""Pytest configuration for repository-relative imports."""

import os
import sys

import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from ladder.engine import UnitConverter  # noqa: E402


@pytest.fixture
def capacity():
    """Byte ladder used by the worked examples: Byte, KB, MB, GB."""
    return UnitConverter(
        [("Byte", 1), ("KB", 1024), ("MB", 1024), ("GB", 1024)]
    )
