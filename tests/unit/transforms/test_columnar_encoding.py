"""Unit tests for columnar snapshot encoding."""

from __future__ import annotations

import pytest

from core.errors import LaurelEncodingError
from core.types import AdvisorRecord, CompactSnapshot
from transforms.columnar_encoding import (
    _lookup,
    decode_records,
    encode_records,
    publication_records,
)

RECORDS = [
    AdvisorRecord(
        name="Zed Young",
        publication="Forbes/SHOOK",
        list_name="Best-in-State Teams 2026",
        firm="UBS",
        state="Texas",
        city="Austin",
        rank="3",
        is_new=1,
    ),
    AdvisorRecord(
        name="A. Smith",
        publication="Barron's",
        list_name="Top 100 Advisors 2025",
        firm="Acme",
        state="California",
        city="Irvine",
        team_assets="$500M",
    ),
    AdvisorRecord(
        name="Bea Quinn",
        publication="Barron's",
        list_name="Top 100 Advisors 2025",
        firm="Acme",
    ),
]


def test_encode_records_builds_sorted_distinct_tables() -> None:
    """Lookup tables should hold each distinct value once, sorted."""
    snapshot = encode_records(RECORDS)

    assert snapshot.publications == ("Barron's", "Forbes/SHOOK")
    assert snapshot.lists == ("Best-in-State Teams 2026", "Top 100 Advisors 2025")
    assert snapshot.firms == ("Acme", "UBS")
    assert snapshot.states == ("", "California", "Texas")
    assert snapshot.cities == ("", "Austin", "Irvine")


def test_encode_records_keeps_input_row_order_and_arity() -> None:
    """Rows should follow input order with fifteen fields each."""
    snapshot = encode_records(RECORDS)

    assert [row[0] for row in snapshot.rows] == ["Zed Young", "A. Smith", "Bea Quinn"]
    assert all(len(row) == 15 for row in snapshot.rows)
    assert snapshot.rows[0][2:5] == (1, 2, 1)
    assert snapshot.rows[0][14] == 1
    assert snapshot.rows[1][7] == "$500M"


def test_decode_records_resolves_every_lookup() -> None:
    """Decoding should rebuild the original records."""
    snapshot = encode_records(RECORDS)

    assert decode_records(snapshot) == RECORDS


def test_encode_empty_record_set() -> None:
    """No records should produce empty tables and rows."""
    snapshot = encode_records([])

    assert snapshot == CompactSnapshot((), (), (), (), (), ())


def test_publication_records_clears_new_flag_and_filters() -> None:
    """Only the requested publication should be returned, never flagged new."""
    snapshot = encode_records(RECORDS)

    forbes = publication_records(snapshot, "Forbes/SHOOK")

    assert [record.name for record in forbes] == ["Zed Young"]
    assert forbes[0].is_new == 0
    assert publication_records(snapshot, "AdvisorHub") == []


def test_lookup_raises_for_missing_value() -> None:
    """A value absent from its table should fail encoding."""
    with pytest.raises(LaurelEncodingError, match="firm lookup table"):
        _lookup({"Acme": 0}, "UBS", "firm")
