"""Unit tests for shared field normalization helpers."""

from __future__ import annotations

from ingest.record_normalizer import (
    expand_state,
    extract_link_text,
    format_currency,
    plain_dashes,
    split_city_state,
    to_text,
)


def test_expand_state_maps_known_abbreviation() -> None:
    """AP-style abbreviations should expand to full state names."""
    assert expand_state("Calif.") == "California"
    assert expand_state("D.C.") == "Washington D.C."


def test_expand_state_passes_unknown_token_through() -> None:
    """Unknown tokens should be returned unchanged."""
    assert expand_state("XYZ") == "XYZ"
    assert expand_state("") == ""


def test_extract_link_text_prefers_link_inner_text() -> None:
    """Names wrapped in links should be unwrapped."""
    assert extract_link_text('<a href="/x">A. Smith</a>') == "A. Smith"
    assert extract_link_text("Plain Name") == "Plain Name"


def test_format_currency_appends_suffix_only_when_value_present() -> None:
    """Currency formatting should skip missing values."""
    assert format_currency("500", "M") == "$500M"
    assert format_currency(1.5, "B") == "$1.5B"
    assert format_currency("", "M") == ""
    assert format_currency(None, "M") == ""


def test_split_city_state_keeps_remaining_parts_as_state() -> None:
    """Only the first separator should split city from state."""
    assert split_city_state("Irvine, Calif.") == ("Irvine", "Calif.")
    assert split_city_state("Washington, D.C., USA") == ("Washington", "D.C., USA")
    assert split_city_state("Remote") == ("Remote", "")


def test_plain_dashes_replaces_en_dash_only() -> None:
    """En dashes should become hyphens; other text is untouched."""
    assert plain_dashes("Pacific \u2013 Partners") == "Pacific - Partners"
    assert plain_dashes("A & B 'C'") == "A & B 'C'"
    assert to_text(None) == "" and to_text(7) == "7"
