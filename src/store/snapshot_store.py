"""Snapshot store for the published data script and its yearly archive.

This module owns the output directory: the current ``advisor-data.js``,
one archived copy per year under ``data/``, and the ``years.json``
manifest listing every archived year.
"""

from __future__ import annotations

import json
import re
from pathlib import Path

from core.config import LaurelConfig
from core.constants import ARCHIVE_DIR_NAME, SNAPSHOT_FILE_NAME, YEARS_MANIFEST_FILE_NAME
from core.errors import LaurelStoreError
from core.logging_config import get_logger
from core.types import CompactSnapshot
from store.snapshot_payload import parse_data_script, render_data_script

_LOGGER = get_logger(__name__)
_ARCHIVE_FILE_PATTERN = re.compile(r"^(\d{4})\.js$")


class SnapshotStore:
    """File-backed store for compact snapshots."""

    def __init__(self, config: LaurelConfig) -> None:
        """Initialize the store from config.

        Args:
            config: Runtime configuration.
        """
        self._output_dir = config.output_dir
        self._archive_dir = config.output_dir / ARCHIVE_DIR_NAME

    @property
    def snapshot_path(self) -> Path:
        """Path of the current data script."""
        return self._output_dir / SNAPSHOT_FILE_NAME

    def load_current(self) -> CompactSnapshot | None:
        """Load the current snapshot.

        Returns:
            Parsed snapshot, or None when no snapshot has been written.

        Raises:
            LaurelStoreError: If the file exists but cannot be parsed.
        """
        if not self.snapshot_path.is_file():
            return None
        script = self.snapshot_path.read_text(encoding="utf-8")
        return parse_data_script(script)

    def load_previous(self) -> CompactSnapshot | None:
        """Load the current snapshot as the baseline for a new run.

        Returns:
            Parsed snapshot, or None when absent or unreadable. An
            unreadable file is logged and treated as no baseline.
        """
        try:
            snapshot = self.load_current()
        except LaurelStoreError as error:
            _LOGGER.warning(
                "previous_snapshot_unreadable",
                path=str(self.snapshot_path),
                error=str(error),
            )
            return None
        if snapshot is not None:
            _LOGGER.info(
                "previous_snapshot_loaded",
                path=str(self.snapshot_path),
                record_count=len(snapshot.rows),
            )
        return snapshot

    def write(self, snapshot: CompactSnapshot, year: int) -> Path:
        """Write the current script, its yearly archive, and the manifest.

        Args:
            snapshot: Encoded snapshot to persist.
            year: Target year used for the archive file name.

        Returns:
            Path of the current data script.

        Raises:
            LaurelStoreError: If any file cannot be written.
        """
        script = render_data_script(snapshot)
        archive_path = self._archive_dir / f"{year}.js"
        try:
            self._output_dir.mkdir(parents=True, exist_ok=True)
            self.snapshot_path.write_text(script, encoding="utf-8")
            self._archive_dir.mkdir(parents=True, exist_ok=True)
            archive_path.write_text(script, encoding="utf-8")
            years = self.archived_years()
            manifest = {"years": list(years), "current": year}
            manifest_path = self._archive_dir / YEARS_MANIFEST_FILE_NAME
            manifest_path.write_text(json.dumps(manifest, indent=2), encoding="utf-8")
        except OSError as error:
            raise LaurelStoreError(
                f"Failed to write snapshot under {self._output_dir}: {error}. "
                "Check that the output directory is writable."
            ) from error
        _LOGGER.info(
            "snapshot_written",
            path=str(self.snapshot_path),
            archive_path=str(archive_path),
            record_count=len(snapshot.rows),
            years=list(years),
        )
        return self.snapshot_path

    def archived_years(self) -> tuple[int, ...]:
        """Return archived years, newest first."""
        if not self._archive_dir.is_dir():
            return ()
        years = [
            int(match.group(1))
            for match in (
                _ARCHIVE_FILE_PATTERN.match(path.name) for path in self._archive_dir.iterdir()
            )
            if match is not None
        ]
        return tuple(sorted(years, reverse=True))
