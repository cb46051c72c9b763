"""Year-over-year new entrant flagging.

A record is new when its lowercased, trimmed name is absent from the
names its publication listed in the previous snapshot. Lists, firms, and
ranks are not compared, so moving between lists of the same publication
does not count as new. Publications without a baseline never flag.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Mapping, Sequence

from core.logging_config import get_logger
from core.types import AdvisorRecord, CompactSnapshot, PreviousSnapshot, PublicationSummary
from transforms.columnar_encoding import PUBLICATION_INDEX

_LOGGER = get_logger(__name__)


def name_key(name: str) -> str:
    """Return the comparison key for an advisor name."""
    return name.lower().strip()


def build_previous_snapshot(snapshot: CompactSnapshot) -> PreviousSnapshot:
    """Index previous names per publication.

    Args:
        snapshot: Snapshot loaded from the prior run.

    Returns:
        Previous snapshot with per-publication name sets. Rows whose
        publication index does not resolve are ignored.
    """
    names: dict[str, set[str]] = {}
    for row in snapshot.rows:
        index = row[PUBLICATION_INDEX]
        if not 0 <= index < len(snapshot.publications):
            continue
        publication = snapshot.publications[index]
        if not publication:
            continue
        names.setdefault(publication, set()).add(name_key(row[0]))
    return PreviousSnapshot(
        snapshot=snapshot,
        names_by_publication={
            publication: frozenset(publication_names)
            for publication, publication_names in names.items()
        },
    )


def flag_new_entrants(
    records: Sequence[AdvisorRecord],
    previous_names: Mapping[str, frozenset[str]],
) -> list[AdvisorRecord]:
    """Assign ``is_new`` to every record.

    Args:
        records: Accumulated records for this run.
        previous_names: Previously seen name keys per publication.

    Returns:
        Copies of the records with ``is_new`` set, in input order.
    """
    flagged: list[AdvisorRecord] = []
    for record in records:
        baseline = previous_names.get(record.publication)
        if not baseline:
            is_new = 0
        else:
            is_new = 0 if name_key(record.name) in baseline else 1
        flagged.append(replace(record, is_new=is_new))
    _LOGGER.info(
        "new_entrants_flagged",
        record_count=len(flagged),
        new_entrants=sum(record.is_new for record in flagged),
    )
    return flagged


def summarize_publications(
    records: Sequence[AdvisorRecord],
    previous_names: Mapping[str, frozenset[str]],
) -> tuple[PublicationSummary, ...]:
    """Summarize current, previous, and new counts per baseline publication."""
    summaries: list[PublicationSummary] = []
    for publication, names in previous_names.items():
        current = [record for record in records if record.publication == publication]
        summaries.append(
            PublicationSummary(
                publication=publication,
                current_count=len(current),
                previous_count=len(names),
                new_count=sum(record.is_new for record in current),
            )
        )
    return tuple(summaries)
