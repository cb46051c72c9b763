"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from dataclasses import replace
from pathlib import Path

import pytest

_SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if str(_SRC_PATH) not in sys.path:
    sys.path.insert(0, str(_SRC_PATH))

from core.config import LaurelConfig  # noqa: E402


@pytest.fixture
def laurel_config(tmp_path: Path) -> LaurelConfig:
    """Config rooted in a temporary directory for year 2026."""
    return replace(
        LaurelConfig.from_env(),
        data_year=2026,
        output_dir=tmp_path / "out",
        cache_dir=tmp_path / "cache",
    )
