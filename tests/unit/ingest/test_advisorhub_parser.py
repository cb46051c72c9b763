"""Unit tests for the AdvisorHub data-table parser."""

from __future__ import annotations

from ingest.advisorhub_parser import first_present, parse_advisorhub_table
from ingest.sources import advisorhub_lists
from tests.fixture_paths import read_fixture

SOLO_LIST = advisorhub_lists(2026)[0]


def test_parse_table_maps_header_cells_to_fields() -> None:
    """Rows should be keyed by header text and normalized into records."""
    records = parse_advisorhub_table(read_fixture("advisorhub/solo.html"), SOLO_LIST)

    assert [record.name for record in records] == ["Maria Gomez", "Tom Baker"]
    maria = records[0]
    assert maria.team_name == "Gomez Wealth"
    assert maria.firm == "Raymond James & Associates"
    assert (maria.city, maria.state) == ("Tampa", "Florida")
    assert maria.rank == "1"
    assert maria.list_name == "Advisors to Watch: Solo 2025"
    assert records[1].team_name == ""


def test_parse_table_accepts_previous_name_header_and_ranking() -> None:
    """Alternate name and rank headers should be recognized."""
    html = (
        '<table data-wpdatatable_id="3"><thead><tr><th>Ranking</th><th>PREV NAME</th>'
        "<th>Firm</th><th>City, State</th></tr></thead>"
        "<tbody><tr><td>7</td><td>Ann Lee*</td><td>Ameriprise</td>"
        "<td>Dallas, Texas</td></tr></tbody></table>"
    )

    (record,) = parse_advisorhub_table(html, SOLO_LIST)

    assert (record.name, record.rank, record.firm) == ("Ann Lee", "7", "Ameriprise")
    assert (record.city, record.state) == ("Dallas", "Texas")


def test_parse_table_returns_empty_without_data_table() -> None:
    """Pages without a data table should produce no records."""
    html = "<table><tbody><tr><td>Someone</td></tr></tbody></table>"

    assert parse_advisorhub_table(html, SOLO_LIST) == []
    assert parse_advisorhub_table("", SOLO_LIST) == []


def test_first_present_skips_empty_candidates() -> None:
    """The first non-empty candidate should win."""
    fields = {"Full Name 1": "", "PREV NAME": "B", "Name": "C"}

    assert first_present(fields, ("Full Name 1", "PREV NAME", "Name")) == "B"
    assert first_present(fields, ("Missing",)) == ""
