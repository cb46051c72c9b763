"""Barron's embedded-table parsers.

Barron's report pages embed each table as a JSON array under a
``"data":[...]`` key whose first object starts with a ``"<year> Rank"``
field. Publication timing varies, so either of two adjacent years is
accepted as the rank token.
"""

from __future__ import annotations

import json
import re
from typing import Any, Iterable

from core.constants import BARRONS_INDIVIDUAL_SUFFIX, BARRONS_TEAM_SUFFIX
from core.logging_config import get_logger
from core.types import AdvisorRecord, RankingList
from ingest.record_normalizer import (
    expand_state,
    extract_link_text,
    format_currency,
    split_city_state,
    to_text,
)

_LOGGER = get_logger(__name__)
_ANY_RANK_KEY = re.compile(r"^\d{4} Rank$")

TEAM_ASSETS_MIL = "Team Assets\n($mil)"
TYPICAL_ACCOUNT_MIL = "Typical Account\n($mil)"
TYPICAL_NET_WORTH_MIL = "Typical Net Worth\n($mil)"
TEAM_ASSETS_BIL = "Team Assets ($bil)"


def rank_years_for(year: int) -> tuple[int, int]:
    """Return the accepted rank years for a target year."""
    return year - 1, year


def extract_embedded_rows(html: str, rank_years: Iterable[int]) -> list[dict[str, Any]]:
    """Find every embedded JSON table and return its row objects.

    Args:
        html: Raw report page markup.
        rank_years: Years accepted in the leading rank field name.

    Returns:
        Row objects across all fragments. Fragments that fail to decode
        are skipped.
    """
    year_tokens = "|".join(str(year) for year in rank_years)
    pattern = re.compile(r'"data":\[(\{"(?:' + year_tokens + r') Rank".*?\})\]')
    rows: list[dict[str, Any]] = []
    for match in pattern.finditer(html):
        try:
            fragment = json.loads("[" + match.group(1) + "]")
        except json.JSONDecodeError as error:
            _LOGGER.debug("barrons_fragment_skipped", reason=error.msg)
            continue
        rows.extend(row for row in fragment if isinstance(row, dict))
    return rows


def read_rank(row: dict[str, Any], rank_years: Iterable[int]) -> str:
    """Return the rank value from whichever accepted year field is present."""
    for year in rank_years:
        key = f"{year} Rank"
        if key in row:
            return to_text(row[key])
    for key in row:
        if _ANY_RANK_KEY.match(key):
            return to_text(row[key])
    return ""


def parse_barrons_individuals(
    html: str,
    ranking_list: RankingList,
    rank_years: tuple[int, ...],
) -> list[AdvisorRecord]:
    """Parse an individual-advisor list page.

    Args:
        html: Raw report page markup.
        ranking_list: List metadata.
        rank_years: Accepted rank years.

    Returns:
        One record per table row with a non-empty advisor name.
    """
    records: list[AdvisorRecord] = []
    for row in extract_embedded_rows(html, rank_years):
        advisor_markup = to_text(row.get("Advisor"))
        name = extract_link_text(advisor_markup).strip()
        if not name:
            continue
        records.append(
            AdvisorRecord(
                name=name,
                firm=to_text(row.get("Firm")),
                state=expand_state(to_text(row.get("State"))),
                city=to_text(row.get("City")),
                rank=read_rank(row, rank_years),
                team_assets=format_currency(row.get(TEAM_ASSETS_MIL), BARRONS_INDIVIDUAL_SUFFIX),
                min_account=format_currency(
                    row.get(TYPICAL_ACCOUNT_MIL), BARRONS_INDIVIDUAL_SUFFIX
                ),
                typical_net_worth=format_currency(
                    row.get(TYPICAL_NET_WORTH_MIL), BARRONS_INDIVIDUAL_SUFFIX
                ),
                client_types=to_text(row.get("Client type(s)")),
                publication=ranking_list.publication,
                list_name=ranking_list.name,
            )
        )
    return records


def parse_barrons_teams(
    html: str,
    ranking_list: RankingList,
    rank_years: tuple[int, ...],
) -> list[AdvisorRecord]:
    """Parse a team list page into one record per key advisor.

    Args:
        html: Raw report page markup.
        ranking_list: List metadata.
        rank_years: Accepted rank years.

    Returns:
        Records sharing their team's firm, location, rank, and assets.
    """
    records: list[AdvisorRecord] = []
    for row in extract_embedded_rows(html, rank_years):
        team_name = to_text(row.get("Team"))
        city, state_part = split_city_state(to_text(row.get("Location")))
        state = expand_state(state_part)
        rank = read_rank(row, rank_years)
        team_assets = format_currency(row.get(TEAM_ASSETS_BIL), BARRONS_TEAM_SUFFIX)
        for advisor in key_advisors(to_text(row.get("Key Advisor(s)")), team_name):
            records.append(
                AdvisorRecord(
                    name=advisor,
                    team_name=team_name,
                    firm=to_text(row.get("Firm")),
                    state=state,
                    city=city,
                    rank=rank,
                    team_assets=team_assets,
                    publication=ranking_list.publication,
                    list_name=ranking_list.name,
                )
            )
    return records


def key_advisors(raw_value: str, team_name: str) -> list[str]:
    """Split the key advisor field, falling back to the team name."""
    if not raw_value:
        return [team_name] if team_name.strip() else []
    names = [name.strip() for name in raw_value.split(",")]
    return [name for name in names if name]
