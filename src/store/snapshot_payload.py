"""Shared serialization for CompactSnapshot payloads.

This module centralizes the ``P/L/F/S/C/R`` JSON shape consumed by the
front end and read back as the next run's previous snapshot.
"""

from __future__ import annotations

import json
from typing import Any

from core.constants import SNAPSHOT_ROW_ARITY, SNAPSHOT_SCRIPT_PREFIX, SNAPSHOT_SCRIPT_SUFFIX
from core.errors import LaurelStoreError
from core.types import CompactSnapshot, SnapshotRow

_TABLE_KEYS = ("P", "L", "F", "S", "C")
_INDEX_POSITIONS = frozenset({2, 3, 4, 11, 12})
_IS_NEW_POSITION = 14


def snapshot_to_payload(snapshot: CompactSnapshot) -> dict[str, object]:
    """Serialize a snapshot into its JSON-safe payload."""
    return {
        "P": list(snapshot.publications),
        "L": list(snapshot.lists),
        "F": list(snapshot.firms),
        "S": list(snapshot.states),
        "C": list(snapshot.cities),
        "R": [list(row) for row in snapshot.rows],
    }


def snapshot_from_payload(payload: Any) -> CompactSnapshot:
    """Deserialize a payload into a snapshot.

    Literal row fields are coerced to text and index fields to integers,
    since earlier snapshots may carry numeric ranks.

    Raises:
        LaurelStoreError: If tables or rows have the wrong shape.
    """
    if not isinstance(payload, dict):
        raise LaurelStoreError("Invalid snapshot payload: expected JSON object at top level.")
    tables = [_read_table(payload, key) for key in _TABLE_KEYS]
    raw_rows = payload.get("R")
    if not isinstance(raw_rows, list):
        raise LaurelStoreError("Invalid snapshot payload: field 'R' must be an array of rows.")
    rows = tuple(_parse_row(raw_row, row_number) for row_number, raw_row in enumerate(raw_rows))
    return CompactSnapshot(
        publications=tables[0],
        lists=tables[1],
        firms=tables[2],
        states=tables[3],
        cities=tables[4],
        rows=rows,
    )


def render_data_script(snapshot: CompactSnapshot) -> str:
    """Render the snapshot as the ``const RAW_DATA=...;`` script."""
    body = json.dumps(snapshot_to_payload(snapshot), ensure_ascii=False, separators=(",", ":"))
    return SNAPSHOT_SCRIPT_PREFIX + body + SNAPSHOT_SCRIPT_SUFFIX


def parse_data_script(script: str) -> CompactSnapshot:
    """Parse a rendered data script back into a snapshot.

    Raises:
        LaurelStoreError: If the script is not valid snapshot JSON.
    """
    body = script.strip()
    if body.startswith(SNAPSHOT_SCRIPT_PREFIX):
        body = body[len(SNAPSHOT_SCRIPT_PREFIX):]
    if body.endswith(SNAPSHOT_SCRIPT_SUFFIX):
        body = body[: -len(SNAPSHOT_SCRIPT_SUFFIX)]
    try:
        payload = json.loads(body)
    except json.JSONDecodeError as error:
        raise LaurelStoreError(
            f"Failed to parse snapshot script: {error.msg} at position {error.pos}."
        ) from error
    return snapshot_from_payload(payload)


def _read_table(payload: dict[str, Any], key: str) -> tuple[str, ...]:
    values = payload.get(key)
    if not isinstance(values, list):
        raise LaurelStoreError(f"Invalid snapshot payload: field '{key}' must be an array.")
    return tuple("" if value is None else str(value) for value in values)


def _parse_row(raw_row: Any, row_number: int) -> SnapshotRow:
    if not isinstance(raw_row, list) or len(raw_row) < SNAPSHOT_ROW_ARITY - 1:
        raise LaurelStoreError(
            f"Invalid snapshot row {row_number}: expected {SNAPSHOT_ROW_ARITY} fields."
        )
    padded = list(raw_row[:SNAPSHOT_ROW_ARITY])
    if len(padded) < SNAPSHOT_ROW_ARITY:
        padded.append(0)
    values: list[object] = []
    for position, value in enumerate(padded):
        if position == _IS_NEW_POSITION:
            values.append(1 if value and _to_index(value, row_number) else 0)
        elif position in _INDEX_POSITIONS:
            values.append(_to_index(value, row_number))
        else:
            values.append("" if value is None else str(value))
    return tuple(values)  # type: ignore[return-value]


def _to_index(value: Any, row_number: int) -> int:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if value is None:
        return -1
    try:
        return int(value)
    except (TypeError, ValueError) as error:
        raise LaurelStoreError(
            f"Invalid snapshot row {row_number}: expected integer index, got {value!r}."
        ) from error
