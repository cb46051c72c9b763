"""Shared typed models.

This module defines immutable data models used by ingest, transforms,
store, and CLI layers to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Protocol

from core.constants import PUBLICATION_ORDER

SnapshotRow = tuple[str, str, int, int, int, str, str, str, str, str, str, int, int, str, int]


class TextFetcher(Protocol):
    """Transport capability consumed by publisher sources."""

    def fetch_text(self, url: str) -> str | None:
        """Return the body for ``url`` or None when unreachable."""

    def fetch_json(self, url: str) -> object | None:
        """Return decoded JSON for ``url`` or None when not found."""


class PageStore(Protocol):
    """Raw page cache capability consumed by publisher sources."""

    def write(self, key: str, content: str) -> None:
        """Persist ``content`` under ``key``."""

    def read(self, key: str) -> str | None:
        """Return content stored under ``key`` or None."""


@dataclass(frozen=True)
class AdvisorRecord:
    """Normalized ranking entry shared by every publisher.

    Attributes:
        name: Advisor or team name, never empty.
        team_name: Team the advisor belongs to, empty for individuals.
        firm: Firm name.
        state: Full state name.
        city: City name.
        rank: Publisher-assigned rank, kept as opaque text.
        category: Publisher-specific classification such as a region.
        team_assets: Preformatted assets string, e.g. ``$1.2B``.
        min_account: Preformatted minimum or typical account size.
        typical_net_worth: Preformatted typical client net worth.
        typical_household: Preformatted typical household size.
        client_types: Free-form client type description.
        publication: Publisher identifier.
        list_name: Human-readable ranking list name.
        is_new: 1 when absent from the publisher's previous snapshot.
    """

    name: str
    publication: str
    list_name: str
    team_name: str = ""
    firm: str = ""
    state: str = ""
    city: str = ""
    rank: str = ""
    category: str = ""
    team_assets: str = ""
    min_account: str = ""
    typical_net_worth: str = ""
    typical_household: str = ""
    client_types: str = ""
    is_new: int = 0


@dataclass(frozen=True)
class RankingList:
    """One published ranking list and where to fetch it.

    Attributes:
        publication: Publisher identifier.
        name: List name written into every record.
        url: Primary page or API URL.
        cache_key: Page cache key for the raw body.
        variant: Parser variant, e.g. ``individual`` or ``teams``.
        alternate_urls: Fallback URLs tried in order after ``url``.
    """

    publication: str
    name: str
    url: str
    cache_key: str
    variant: str = "individual"
    alternate_urls: tuple[str, ...] = ()


@dataclass(frozen=True)
class CompactSnapshot:
    """Columnar snapshot with sorted lookup tables and index rows.

    Attributes:
        publications: Sorted distinct publication names (``P``).
        lists: Sorted distinct list names (``L``).
        firms: Sorted distinct firm names (``F``).
        states: Sorted distinct state names (``S``).
        cities: Sorted distinct city names (``C``).
        rows: Fixed-arity row tuples (``R``).
    """

    publications: tuple[str, ...]
    lists: tuple[str, ...]
    firms: tuple[str, ...]
    states: tuple[str, ...]
    cities: tuple[str, ...]
    rows: tuple[SnapshotRow, ...]


@dataclass(frozen=True)
class PreviousSnapshot:
    """Prior run snapshot, read-only for the whole run.

    Attributes:
        snapshot: Columnar data loaded at run start.
        names_by_publication: Lowercased trimmed names seen per publication.
    """

    snapshot: CompactSnapshot
    names_by_publication: Mapping[str, frozenset[str]] = field(default_factory=dict)


@dataclass(frozen=True)
class RunOptions:
    """Update run options.

    Attributes:
        year: Target ranking year.
        refetch: Publishers to fetch fresh; others reuse the previous snapshot.
        dry_run: Compute and report without writing output files.
    """

    year: int
    refetch: frozenset[str] = frozenset(PUBLICATION_ORDER)
    dry_run: bool = False


@dataclass(frozen=True)
class PublicationSummary:
    """Per-publication year-over-year counts.

    Attributes:
        publication: Publisher identifier.
        current_count: Records in this run.
        previous_count: Distinct names in the previous snapshot.
        new_count: Records flagged as new entrants.
    """

    publication: str
    current_count: int
    previous_count: int
    new_count: int


@dataclass(frozen=True)
class RunReport:
    """Outcome of a completed update run.

    Attributes:
        year: Target ranking year.
        record_count: Rows in the encoded snapshot.
        new_entrants: Rows flagged as new entrants.
        publications: Size of the publications lookup table.
        lists: Size of the lists lookup table.
        firms: Size of the firms lookup table.
        states: Size of the states lookup table.
        cities: Size of the cities lookup table.
        payload_bytes: Size of the rendered snapshot script.
        summaries: Per-publication counts for publications with a baseline.
        output_path: Written snapshot path, None for dry runs.
    """

    year: int
    record_count: int
    new_entrants: int
    publications: int
    lists: int
    firms: int
    states: int
    cities: int
    payload_bytes: int
    summaries: tuple[PublicationSummary, ...] = ()
    output_path: str | None = None
