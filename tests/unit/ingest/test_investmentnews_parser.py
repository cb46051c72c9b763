"""Unit tests for InvestmentNews list parsers."""

from __future__ import annotations

from ingest.investmentnews_parser import (
    harvest_person_names,
    parse_five_star_names,
    parse_hnw_disclosures,
)
from ingest.sources import investmentnews_lists
from tests.fixture_paths import read_fixture

HNW_LIST, FIVE_STAR_LIST = investmentnews_lists(2026)


def test_parse_hnw_disclosures_groups_firms_by_region() -> None:
    """Each list item should become a firm record tagged with its region."""
    records = parse_hnw_disclosures(read_fixture("investmentnews/hnw.html"), HNW_LIST)

    assert [(record.name, record.category) for record in records] == [
        ("Smith & Jones Wealth", "Northeast"),
        ("O'Neil Advisors", "Northeast"),
        ("Pacific - Partners", "West"),
    ]
    assert all(record.firm == record.name for record in records)
    assert records[0].list_name == "Top Independent HNW Advisors 2025"


def test_parse_hnw_disclosures_ignores_items_outside_details() -> None:
    """List items outside disclosure blocks should not be parsed."""
    html = "<ul><li>Loose Firm</li></ul>"

    assert parse_hnw_disclosures(html, HNW_LIST) == []


def test_parse_hnw_disclosures_handles_uppercase_and_nested_blocks() -> None:
    """Tag case should not matter and nested regions keep their own firms."""
    html = (
        "<DETAILS><SUMMARY>West</SUMMARY><UL><LI>Acme Wealth</LI></UL>"
        "<details><summary>Mountain</summary><ul><li>Firm A</li></ul></details>"
        "<ul><li>Firm B</li></ul></DETAILS>"
    )

    records = parse_hnw_disclosures(html, HNW_LIST)

    assert [(record.name, record.category) for record in records] == [
        ("Acme Wealth", "West"),
        ("Firm B", "West"),
        ("Firm A", "Mountain"),
    ]


def test_harvest_person_names_dedups_and_filters_length() -> None:
    """Names should be distinct, ordered by pattern, and length bounded."""
    names = harvest_person_names(read_fixture("investmentnews/five_star.html"))

    assert names == ["John Smith", "Peter Q. Adams", "Mary Ann Jones", "Annual Report"]


def test_harvest_person_names_matches_whole_element_text() -> None:
    """Names must fill the element text; nested markup inside it is allowed."""
    html = "<UL><LI><a>Grace Hopper</a></LI><li>Grace Hopper and team</li></UL>"

    assert harvest_person_names(html) == ["Grace Hopper"]


def test_parse_five_star_names_builds_name_only_records() -> None:
    """Harvested names should carry only publication and list metadata."""
    records = parse_five_star_names("<li>Grace Hopper</li>", FIVE_STAR_LIST)

    (record,) = records
    assert record.name == "Grace Hopper"
    assert record.firm == "" and record.state == ""
    assert record.publication == "InvestmentNews"
    assert record.list_name == "5-Star Independent Advisors 2025"
