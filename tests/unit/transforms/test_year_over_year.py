"""Unit tests for year-over-year new entrant flagging."""

from __future__ import annotations

from core.types import AdvisorRecord
from store.snapshot_payload import parse_data_script
from tests.fixture_paths import read_fixture
from transforms.year_over_year import (
    build_previous_snapshot,
    flag_new_entrants,
    name_key,
    summarize_publications,
)


def _record(name: str, publication: str = "Barron's", list_name: str = "Top 100") -> AdvisorRecord:
    return AdvisorRecord(name=name, publication=publication, list_name=list_name)


def test_build_previous_snapshot_indexes_names_per_publication() -> None:
    """Previous names should be lowercased and grouped by publication."""
    snapshot = parse_data_script(read_fixture("snapshots/advisor-data.js"))

    previous = build_previous_snapshot(snapshot)

    assert previous.names_by_publication == {
        "AdvisorHub": frozenset({"tom baker"}),
        "Barron's": frozenset({"jane doe", "robert lee"}),
        "Forbes/SHOOK": frozenset({"carol white"}),
    }


def test_flag_new_entrants_compares_case_and_space_insensitively() -> None:
    """Known names with different casing should not be flagged."""
    previous_names = {"Barron's": frozenset({"jane doe"})}
    records = [_record(" Jane DOE "), _record("John Smith")]

    flagged = flag_new_entrants(records, previous_names)

    assert [record.is_new for record in flagged] == [0, 1]


def test_flag_new_entrants_ignores_list_changes_within_publication() -> None:
    """Moving lists inside the same publication is not a new entry."""
    previous_names = {"Barron's": frozenset({"jane doe"})}

    (flagged,) = flag_new_entrants([_record("Jane Doe", list_name="Top 1200")], previous_names)

    assert flagged.is_new == 0


def test_flag_new_entrants_without_baseline_flags_nothing() -> None:
    """Publications absent from or empty in the baseline never flag."""
    records = [_record("John Smith"), _record("Ann Lee", publication="AdvisorHub")]

    flagged = flag_new_entrants(records, {"AdvisorHub": frozenset()})

    assert [record.is_new for record in flagged] == [0, 0]


def test_summarize_publications_reports_baseline_publications() -> None:
    """Summaries should cover each publication present in the baseline."""
    previous_names = {"Barron's": frozenset({"jane doe", "robert lee"})}
    flagged = flag_new_entrants([_record("Jane Doe"), _record("John Smith")], previous_names)

    (summary,) = summarize_publications(flagged, previous_names)

    assert (summary.current_count, summary.previous_count, summary.new_count) == (2, 2, 1)


def test_name_key_normalizes_case_and_whitespace() -> None:
    """Keys should be lowercased and trimmed."""
    assert name_key("  Mary ANN ") == "mary ann"
