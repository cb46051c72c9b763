"""Columnar snapshot encoding.

Repeated strings (publication, list, firm, state, city) are moved into
sorted lookup tables and each record becomes a fixed-arity row of
literals and table indices. Tables are always built from the same record
set that produces the rows, so every lookup must succeed.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable, Sequence

from core.errors import LaurelEncodingError
from core.types import AdvisorRecord, CompactSnapshot, SnapshotRow

FIRM_INDEX = 2
STATE_INDEX = 3
CITY_INDEX = 4
PUBLICATION_INDEX = 11
LIST_INDEX = 12


def encode_records(records: Sequence[AdvisorRecord]) -> CompactSnapshot:
    """Encode records into a compact snapshot.

    Args:
        records: Flagged records in publisher concatenation order.

    Returns:
        Snapshot whose rows follow input order.

    Raises:
        LaurelEncodingError: If a row value is missing from its table.
    """
    publications = _sorted_distinct(record.publication for record in records)
    lists = _sorted_distinct(record.list_name for record in records)
    firms = _sorted_distinct(record.firm for record in records)
    states = _sorted_distinct(record.state for record in records)
    cities = _sorted_distinct(record.city for record in records)
    publication_index = _position_map(publications)
    list_index = _position_map(lists)
    firm_index = _position_map(firms)
    state_index = _position_map(states)
    city_index = _position_map(cities)
    rows: list[SnapshotRow] = []
    for record in records:
        rows.append(
            (
                record.name,
                record.team_name,
                _lookup(firm_index, record.firm, "firm"),
                _lookup(state_index, record.state, "state"),
                _lookup(city_index, record.city, "city"),
                record.rank,
                record.category,
                record.team_assets,
                record.min_account,
                record.typical_net_worth,
                record.typical_household,
                _lookup(publication_index, record.publication, "publication"),
                _lookup(list_index, record.list_name, "list"),
                record.client_types,
                record.is_new,
            )
        )
    return CompactSnapshot(
        publications=publications,
        lists=lists,
        firms=firms,
        states=states,
        cities=cities,
        rows=tuple(rows),
    )


def decode_row(snapshot: CompactSnapshot, row: SnapshotRow) -> AdvisorRecord:
    """Rebuild one record by resolving row indices through lookup tables.

    Indices outside a table resolve to empty text.
    """
    return AdvisorRecord(
        name=row[0],
        team_name=row[1],
        firm=_resolve(snapshot.firms, row[FIRM_INDEX]),
        state=_resolve(snapshot.states, row[STATE_INDEX]),
        city=_resolve(snapshot.cities, row[CITY_INDEX]),
        rank=row[5],
        category=row[6],
        team_assets=row[7],
        min_account=row[8],
        typical_net_worth=row[9],
        typical_household=row[10],
        publication=_resolve(snapshot.publications, row[PUBLICATION_INDEX]),
        list_name=_resolve(snapshot.lists, row[LIST_INDEX]),
        client_types=row[13],
        is_new=row[14],
    )


def decode_records(snapshot: CompactSnapshot) -> list[AdvisorRecord]:
    """Rebuild every record of a snapshot in row order."""
    return [decode_row(snapshot, row) for row in snapshot.rows]


def publication_records(snapshot: CompactSnapshot, publication: str) -> list[AdvisorRecord]:
    """Rebuild the records of one publication.

    Args:
        snapshot: Previously persisted snapshot.
        publication: Publisher identifier looked up in the publications table.

    Returns:
        Records for the publication with ``is_new`` cleared, or an empty
        list when the publication was never recorded.
    """
    if publication not in snapshot.publications:
        return []
    target_index = snapshot.publications.index(publication)
    records: list[AdvisorRecord] = []
    for row in snapshot.rows:
        if row[PUBLICATION_INDEX] != target_index:
            continue
        records.append(replace(decode_row(snapshot, row), publication=publication, is_new=0))
    return records


def _sorted_distinct(values: Iterable[str]) -> tuple[str, ...]:
    return tuple(sorted(set(values)))


def _position_map(table: tuple[str, ...]) -> dict[str, int]:
    return {value: position for position, value in enumerate(table)}


def _lookup(positions: dict[str, int], value: str, table_name: str) -> int:
    try:
        return positions[value]
    except KeyError as error:
        raise LaurelEncodingError(
            f"Value {value!r} is missing from the {table_name} lookup table. "
            "Lookup tables must be built from the same records as the rows."
        ) from error


def _resolve(table: tuple[str, ...], index: int) -> str:
    if 0 <= index < len(table):
        return table[index]
    return ""
