"""Python SDK for ranking updates and snapshot inspection.

This module exposes high-level APIs backed by the pipeline runner and
the snapshot store.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import replace
from pathlib import Path

from core.config import LaurelConfig
from core.types import AdvisorRecord, CompactSnapshot, RunOptions, RunReport
from ingest.pipeline import update_rankings
from store.snapshot_store import SnapshotStore
from transforms.columnar_encoding import decode_records


class LaurelClient:
    """Primary SDK entry point."""

    def __init__(self, config: LaurelConfig | None = None) -> None:
        """Create SDK client.

        Args:
            config: Optional runtime configuration.
        """
        self._config = config or LaurelConfig.from_env()
        self._store = SnapshotStore(self._config)

    @property
    def config(self) -> LaurelConfig:
        """Runtime configuration used by this client."""
        return self._config

    def update(self, options: RunOptions) -> RunReport:
        """Fetch, merge, flag, encode, and persist the rankings.

        Args:
            options: Run options.

        Returns:
            Run report.

        Raises:
            LaurelNoDataError: If no publisher yields any record.
            LaurelStoreError: If snapshot persistence fails.
        """
        return update_rankings(options, self._config)

    def snapshot(self) -> CompactSnapshot | None:
        """Load the current snapshot, or None before the first run."""
        return self._store.load_current()

    def records(self) -> list[AdvisorRecord]:
        """Decode every record in the current snapshot."""
        snapshot = self.snapshot()
        if snapshot is None:
            return []
        return decode_records(snapshot)

    def publication_counts(self) -> dict[str, tuple[int, int]]:
        """Return record and new-entrant counts per publication."""
        totals: Counter[str] = Counter()
        new_counts: Counter[str] = Counter()
        for record in self.records():
            totals[record.publication] += 1
            new_counts[record.publication] += record.is_new
        return {
            publication: (totals[publication], new_counts[publication])
            for publication in sorted(totals)
        }

    def archived_years(self) -> tuple[int, ...]:
        """Return archived snapshot years, newest first."""
        return self._store.archived_years()

    def with_output_dir(self, output_dir: str) -> "LaurelClient":
        """Clone the client with a different output directory.

        Args:
            output_dir: New output directory path.

        Returns:
            New SDK client instance.
        """
        resolved = Path(output_dir).expanduser().resolve()
        return LaurelClient(replace(self._config, output_dir=resolved))
