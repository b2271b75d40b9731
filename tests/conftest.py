from __future__ import annotations

"""Pytest configuration.

This file is imported during *collection*, so it's the right place to set
process-wide environment variables needed for stable imports.
"""

import os
import tempfile
from pathlib import Path

import pytest

# Force a non-interactive backend in test environments.
os.environ.setdefault("MPLBACKEND", "Agg")

# Isolate matplotlib cache to avoid flaky font-cache locking.
os.environ.setdefault("MPLCONFIGDIR", tempfile.mkdtemp(prefix="mplconfig-"))

ISS_TLE_TEXT = """ISS (ZARYA)
1 25544U 98067A   19343.69339541  .00001764  00000-0  38792-4 0  9991
2 25544  51.6439 211.2001 0007417  17.6667  85.6398 15.50103472202482
"""


@pytest.fixture
def iss_tle_text() -> str:
    return ISS_TLE_TEXT


@pytest.fixture
def iss_tle_file(tmp_path: Path) -> Path:
    path = tmp_path / "iss.tle"
    path.write_text(ISS_TLE_TEXT, encoding="utf-8")
    return path
