"""Ranking update orchestration.

This module loads the previous snapshot once, acquires each publisher in
catalogue order through the merge controller, flags new entrants,
encodes the combined records, and persists the result unless dry-run.
"""

from __future__ import annotations

from functools import partial
from typing import Mapping

from core.config import LaurelConfig
from core.constants import PUBLICATION_ORDER
from core.errors import LaurelNoDataError
from core.logging_config import get_logger
from core.types import (
    AdvisorRecord,
    CompactSnapshot,
    PageStore,
    PreviousSnapshot,
    RunOptions,
    RunReport,
    TextFetcher,
)
from ingest.http_fetcher import HttpFetcher
from ingest.merge_controller import acquire_publication
from ingest.page_cache import PageCache
from ingest.sources import PUBLISHER_SOURCES, SourceContext
from store.snapshot_payload import render_data_script
from store.snapshot_store import SnapshotStore
from transforms.columnar_encoding import encode_records
from transforms.year_over_year import (
    build_previous_snapshot,
    flag_new_entrants,
    summarize_publications,
)

_LOGGER = get_logger(__name__)


class RankingsPipelineRunner:
    """Single-run orchestrator for the yearly ranking update."""

    def __init__(
        self,
        options: RunOptions,
        config: LaurelConfig,
        fetcher: TextFetcher | None = None,
        cache: PageStore | None = None,
        store: SnapshotStore | None = None,
    ) -> None:
        self._options = options
        self._store = store or SnapshotStore(config)
        self._owned_fetcher: HttpFetcher | None = None
        if fetcher is None:
            self._owned_fetcher = HttpFetcher(timeout=config.http_timeout)
            fetcher = self._owned_fetcher
        self._context = SourceContext(
            fetcher=fetcher,
            cache=cache or PageCache(config.cache_dir),
            year=options.year,
        )

    def run(self) -> RunReport:
        """Execute the update and return its report.

        Raises:
            LaurelNoDataError: If no publisher yields any record.
            LaurelStoreError: If the snapshot cannot be written.
        """
        previous = self._load_previous()
        try:
            records = self._acquire_all(previous)
        finally:
            if self._owned_fetcher is not None:
                self._owned_fetcher.close()
        if not records:
            raise LaurelNoDataError(
                "No records found for any publication. "
                f"Check whether the {self._options.year} lists are published yet."
            )
        previous_names = previous.names_by_publication if previous else {}
        flagged = flag_new_entrants(records, previous_names)
        snapshot = encode_records(flagged)
        output_path = None
        if self._options.dry_run:
            _LOGGER.info("dry_run_skipped_write", path=str(self._store.snapshot_path))
        else:
            output_path = str(self._store.write(snapshot, self._options.year))
        report = _build_report(
            self._options.year,
            snapshot,
            flagged,
            previous_names,
            output_path,
        )
        _log_run_completion(report, self._options)
        return report

    def _load_previous(self) -> PreviousSnapshot | None:
        snapshot = self._store.load_previous()
        if snapshot is None:
            return None
        return build_previous_snapshot(snapshot)

    def _acquire_all(self, previous: PreviousSnapshot | None) -> list[AdvisorRecord]:
        records: list[AdvisorRecord] = []
        for publication in PUBLICATION_ORDER:
            fetch_records = partial(PUBLISHER_SOURCES[publication], self._context)
            records.extend(
                acquire_publication(
                    publication,
                    publication in self._options.refetch,
                    fetch_records,
                    previous,
                )
            )
        return records


def update_rankings(options: RunOptions, config: LaurelConfig) -> RunReport:
    """Run the yearly ranking update with default collaborators.

    Args:
        options: Run options.
        config: Runtime configuration.

    Returns:
        Report describing the encoded snapshot.

    Raises:
        LaurelNoDataError: If no publisher yields any record.
        LaurelStoreError: If snapshot persistence fails.
    """
    runner = RankingsPipelineRunner(options, config)
    return runner.run()


def _build_report(
    year: int,
    snapshot: CompactSnapshot,
    records: list[AdvisorRecord],
    previous_names: Mapping[str, frozenset[str]],
    output_path: str | None,
) -> RunReport:
    return RunReport(
        year=year,
        record_count=len(snapshot.rows),
        new_entrants=sum(record.is_new for record in records),
        publications=len(snapshot.publications),
        lists=len(snapshot.lists),
        firms=len(snapshot.firms),
        states=len(snapshot.states),
        cities=len(snapshot.cities),
        payload_bytes=len(render_data_script(snapshot).encode("utf-8")),
        summaries=summarize_publications(records, previous_names),
        output_path=output_path,
    )


def _log_run_completion(report: RunReport, options: RunOptions) -> None:
    _LOGGER.info(
        "update_completed",
        year=report.year,
        record_count=report.record_count,
        new_entrants=report.new_entrants,
        publications=report.publications,
        lists=report.lists,
        refetched=sorted(options.refetch),
        dry_run=options.dry_run,
        output_path=report.output_path,
    )
