"""Per-publisher fresh-versus-previous record selection.

Fresh records win whenever a fetch yields any. A fetch that yields
nothing or raises falls back to the publisher's records in the previous
snapshot, so a transient scrape failure never erases prior data.
"""

from __future__ import annotations

from typing import Callable

from core.logging_config import get_logger
from core.types import AdvisorRecord, PreviousSnapshot
from transforms.columnar_encoding import publication_records

_LOGGER = get_logger(__name__)


def previous_records(previous: PreviousSnapshot | None, publication: str) -> list[AdvisorRecord]:
    """Rebuild a publication's records from the previous snapshot.

    Returns:
        Reconstructed records, empty when there is no previous snapshot
        or the publication was never recorded.
    """
    if previous is None:
        return []
    return publication_records(previous.snapshot, publication)


def acquire_publication(
    publication: str,
    should_refetch: bool,
    fetch_records: Callable[[], list[AdvisorRecord]],
    previous: PreviousSnapshot | None,
) -> list[AdvisorRecord]:
    """Return the records to use for one publication this run.

    Args:
        publication: Publisher identifier.
        should_refetch: Whether to fetch fresh data at all.
        fetch_records: Fetch-and-parse pipeline for the publisher.
        previous: Snapshot from the prior run, if any.

    Returns:
        Fresh records when at least one was obtained, otherwise the
        previous snapshot's records for the publication.
    """
    if not should_refetch:
        reused = previous_records(previous, publication)
        _LOGGER.info("publication_reused", publication=publication, record_count=len(reused))
        return reused
    try:
        records = fetch_records()
    except Exception as error:
        fallback = previous_records(previous, publication)
        _LOGGER.error(
            "publication_fetch_failed",
            publication=publication,
            error=str(error),
            fallback_count=len(fallback),
        )
        return fallback
    if records:
        _LOGGER.info("publication_fetched", publication=publication, record_count=len(records))
        return records
    fallback = previous_records(previous, publication)
    _LOGGER.warning(
        "publication_fallback_used",
        publication=publication,
        fallback_count=len(fallback),
    )
    return fallback
