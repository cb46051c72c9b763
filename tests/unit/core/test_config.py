"""Unit tests for core config parsing."""

from __future__ import annotations

from datetime import date

import pytest

from core.config import LaurelConfig, parse_data_year
from core.errors import LaurelConfigError


def test_from_env_reads_data_year_and_dirs(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should read year and directories from environment."""
    monkeypatch.setenv("LAUREL_DATA_YEAR", "2025")
    monkeypatch.setenv("LAUREL_OUTPUT_DIR", "./.tmp-laurel")
    monkeypatch.setenv("LAUREL_CACHE_DIR", "./.tmp-laurel-cache")

    config = LaurelConfig.from_env()

    assert config.data_year == 2025
    assert config.output_dir.name == ".tmp-laurel"
    assert config.cache_dir.name == ".tmp-laurel-cache"


def test_from_env_defaults_to_current_year(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should default the target year to the calendar year."""
    monkeypatch.delenv("LAUREL_DATA_YEAR", raising=False)

    config = LaurelConfig.from_env()

    assert config.data_year == date.today().year


@pytest.mark.parametrize("raw_value", ["25", "twenty", "20255", ""])
def test_parse_data_year_rejects_non_four_digit_values(raw_value: str) -> None:
    """Year parsing should reject anything but four digits."""
    with pytest.raises(LaurelConfigError):
        parse_data_year(raw_value)


def test_from_env_raises_for_invalid_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for non-positive or non-numeric timeouts."""
    monkeypatch.setenv("LAUREL_HTTP_TIMEOUT", "-3")

    with pytest.raises(LaurelConfigError):
        LaurelConfig.from_env()

    monkeypatch.setenv("LAUREL_HTTP_TIMEOUT", "soon")

    with pytest.raises(LaurelConfigError):
        LaurelConfig.from_env()
