"""AdvisorHub data-table parser.

AdvisorHub renders each list as a wpDataTables HTML table. Header cell
text becomes the field names for every body row.
"""

from __future__ import annotations

from bs4 import BeautifulSoup, Tag

from core.constants import (
    ADVISORHUB_NAME_HEADERS,
    ADVISORHUB_RANK_HEADERS,
    ADVISORHUB_TABLE_ATTRIBUTE,
)
from core.types import AdvisorRecord, RankingList
from ingest.record_normalizer import split_city_state


def parse_advisorhub_table(html: str, ranking_list: RankingList) -> list[AdvisorRecord]:
    """Parse the first data table on an AdvisorHub list page.

    Args:
        html: Raw list page markup.
        ranking_list: List metadata.

    Returns:
        One record per body row with at least one cell and a name.
        Empty when the page has no data table or no table body.
    """
    soup = BeautifulSoup(html, "html.parser")
    table = soup.find(_is_data_table)
    if not isinstance(table, Tag):
        return []
    headers = _header_names(table)
    body = table.find("tbody")
    if not isinstance(body, Tag):
        return []
    records: list[AdvisorRecord] = []
    for row in body.find_all("tr"):
        cells = [cell.get_text().strip() for cell in row.find_all("td")]
        if not cells:
            continue
        fields = {
            header: cells[index] if index < len(cells) else ""
            for index, header in enumerate(headers)
        }
        record = _record_from_fields(fields, ranking_list)
        if record is not None:
            records.append(record)
    return records


def first_present(fields: dict[str, str], candidates: tuple[str, ...]) -> str:
    """Return the first non-empty value among candidate headers."""
    for header in candidates:
        value = fields.get(header, "")
        if value:
            return value
    return ""


def _is_data_table(tag: Tag) -> bool:
    if tag.name != "table":
        return False
    return any(attribute.endswith(ADVISORHUB_TABLE_ATTRIBUTE) for attribute in tag.attrs)


def _header_names(table: Tag) -> list[str]:
    head = table.find("thead")
    if not isinstance(head, Tag):
        return []
    return [cell.get_text().strip() for cell in head.find_all("th")]


def _record_from_fields(fields: dict[str, str], ranking_list: RankingList) -> AdvisorRecord | None:
    name = first_present(fields, ADVISORHUB_NAME_HEADERS)
    if name.endswith("*"):
        name = name[:-1]
    name = name.strip()
    if not name:
        return None
    city, state = split_city_state(fields.get("City, State", ""))
    return AdvisorRecord(
        name=name,
        team_name=fields.get("Team", ""),
        firm=fields.get("Firm", ""),
        state=state,
        city=city,
        rank=first_present(fields, ADVISORHUB_RANK_HEADERS),
        publication=ranking_list.publication,
        list_name=ranking_list.name,
    )
