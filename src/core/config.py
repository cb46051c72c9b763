"""Runtime configuration model for Laurel.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
import os
from pathlib import Path

from core.constants import DEFAULT_CACHE_DIR, DEFAULT_HTTP_TIMEOUT_SECONDS, DEFAULT_OUTPUT_DIR
from core.errors import LaurelConfigError


@dataclass(frozen=True)
class LaurelConfig:
    """Validated runtime configuration.

    Attributes:
        data_year: Target ranking year; lists are published for year - 1.
        output_dir: Directory holding the snapshot script and archive.
        cache_dir: Directory for raw page copies reused when fetches fail.
        http_timeout: Per-request timeout in seconds.
    """

    data_year: int
    output_dir: Path
    cache_dir: Path
    http_timeout: float

    @classmethod
    def from_env(cls) -> "LaurelConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            LaurelConfigError: If environment values are invalid.
        """
        year_value = os.getenv("LAUREL_DATA_YEAR", str(date.today().year))
        output_dir_value = os.getenv("LAUREL_OUTPUT_DIR", str(DEFAULT_OUTPUT_DIR))
        cache_dir_value = os.getenv("LAUREL_CACHE_DIR", str(DEFAULT_CACHE_DIR))
        timeout_value = os.getenv("LAUREL_HTTP_TIMEOUT", str(DEFAULT_HTTP_TIMEOUT_SECONDS))
        return cls(
            data_year=parse_data_year(year_value),
            output_dir=Path(output_dir_value).expanduser().resolve(),
            cache_dir=Path(cache_dir_value).expanduser().resolve(),
            http_timeout=_parse_http_timeout(timeout_value),
        )


def parse_data_year(raw_value: str) -> int:
    """Parse a four-digit target year.

    Args:
        raw_value: Raw string from environment or command line.

    Returns:
        Parsed year.

    Raises:
        LaurelConfigError: If value is not a four-digit integer.
    """
    stripped = raw_value.strip()
    if len(stripped) != 4 or not stripped.isdigit():
        raise LaurelConfigError(
            f"Invalid data year: expected a four-digit year, got '{raw_value}'. "
            "Set LAUREL_DATA_YEAR or --year to a value such as 2025."
        )
    return int(stripped)


def _parse_http_timeout(raw_value: str) -> float:
    try:
        timeout = float(raw_value)
    except ValueError as error:
        raise LaurelConfigError(
            "Invalid LAUREL_HTTP_TIMEOUT value: "
            f"expected number of seconds, got '{raw_value}'."
        ) from error
    if timeout <= 0:
        raise LaurelConfigError(
            f"Invalid LAUREL_HTTP_TIMEOUT value: expected a positive number, got '{raw_value}'."
        )
    return timeout
