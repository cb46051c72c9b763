"""InvestmentNews list parsers.

The HNW list groups firms under collapsible ``<details>`` blocks, one
per region. The 5-Star list has no stable structure, so names are
harvested by matching list items and bold text against a name pattern.
That scan is approximate: it can miss names and it can pick up headings
that look like names.
"""

from __future__ import annotations

import re

from bs4 import BeautifulSoup, Tag

from core.constants import FIVE_STAR_NAME_MAX_LENGTH, FIVE_STAR_NAME_MIN_LENGTH
from core.types import AdvisorRecord, RankingList
from ingest.record_normalizer import plain_dashes

PERSON_NAME_PATTERN = re.compile(r"[A-Z][a-z]+ (?:[A-Z]\. )?[A-Z][a-z]+(?:\s+[A-Z][a-z]+)?")
NAME_TAG_GROUPS = (("li",), ("strong", "b"))


def parse_hnw_disclosures(html: str, ranking_list: RankingList) -> list[AdvisorRecord]:
    """Parse region disclosure blocks into one record per firm.

    Args:
        html: Raw HNW list page markup.
        ranking_list: List metadata.

    Returns:
        Records named after each listed firm, with the region as category.
        Firms inside a nested block belong to that block's region.
    """
    soup = BeautifulSoup(html, "html.parser")
    records: list[AdvisorRecord] = []
    for details in soup.find_all("details"):
        region = _region_label(details)
        for item in details.find_all("li"):
            if item.find_parent("details") is not details:
                continue
            firm = plain_dashes(item.get_text()).strip()
            if not firm:
                continue
            records.append(
                AdvisorRecord(
                    name=firm,
                    firm=firm,
                    category=region,
                    publication=ranking_list.publication,
                    list_name=ranking_list.name,
                )
            )
    return records


def harvest_person_names(html: str) -> list[str]:
    """Collect distinct capitalized two or three word names.

    Returns:
        Names in first-seen order, list items before bold text, limited
        to plausible lengths.
    """
    soup = BeautifulSoup(html, "html.parser")
    names: dict[str, None] = {}
    for tag_names in NAME_TAG_GROUPS:
        for element in soup.find_all(list(tag_names)):
            name = element.get_text().strip()
            if not PERSON_NAME_PATTERN.fullmatch(name):
                continue
            if FIVE_STAR_NAME_MIN_LENGTH < len(name) < FIVE_STAR_NAME_MAX_LENGTH:
                names.setdefault(name, None)
    return list(names)


def parse_five_star_names(html: str, ranking_list: RankingList) -> list[AdvisorRecord]:
    """Build name-only records from the harvested 5-Star names."""
    return [
        AdvisorRecord(
            name=name,
            publication=ranking_list.publication,
            list_name=ranking_list.name,
        )
        for name in harvest_person_names(html)
    ]


def _region_label(details: Tag) -> str:
    summary = details.find("summary")
    if not isinstance(summary, Tag) or summary.find_parent("details") is not details:
        return ""
    return summary.get_text(strip=True)
