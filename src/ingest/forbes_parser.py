"""Forbes/SHOOK ranked-organization parser.

The Forbes API pages through wealth-management teams. Each organization
carries a list of group members, a parent firm, and free-form Q&A pairs
holding asset and account-size metrics. One record is produced per group
member, or one per organization when it lists no members.
"""

from __future__ import annotations

import json
from typing import Any, Iterable

from core.constants import (
    FORBES_MAX_PAGES,
    FORBES_PAGE_SIZE,
    FORBES_QA_HOUSEHOLD,
    FORBES_QA_MIN_ACCOUNT,
    FORBES_QA_NET_WORTH,
    FORBES_QA_TEAM_ASSETS,
)
from core.logging_config import get_logger
from core.types import AdvisorRecord, PageStore, RankingList, TextFetcher
from ingest.record_normalizer import to_text

_LOGGER = get_logger(__name__)


def walk_forbes_pages(
    fetcher: TextFetcher,
    api_url: str,
    cache: PageStore | None = None,
) -> list[dict[str, Any]]:
    """Fetch API pages until an empty page or the page cap.

    Args:
        fetcher: Transport used for JSON requests.
        api_url: Base API URL without paging parameters.
        cache: Optional page cache receiving each raw page.

    Returns:
        Raw page payloads in fetch order. Empty when the list is not
        published yet.

    Raises:
        LaurelTransportError: If the transport fails for a page.
    """
    pages: list[dict[str, Any]] = []
    for page_number in range(FORBES_MAX_PAGES):
        start = page_number * FORBES_PAGE_SIZE
        url = f"{api_url}?limit={FORBES_PAGE_SIZE}&start={start}"
        payload = fetcher.fetch_json(url)
        if payload is None:
            _LOGGER.info("forbes_list_not_published", url=api_url)
            return []
        if not isinstance(payload, dict):
            _LOGGER.warning("forbes_page_unexpected_shape", page=page_number)
            break
        organizations = page_organizations(payload)
        _LOGGER.debug("forbes_page_fetched", page=page_number, teams=len(organizations))
        if not organizations:
            break
        pages.append(payload)
        if cache is not None:
            cache.write(f"forbes_page_{page_number}.json", json.dumps(payload))
    return pages


def page_organizations(page: dict[str, Any]) -> list[dict[str, Any]]:
    """Return the organization entries of one API page."""
    organization_list = page.get("organizationList")
    if not isinstance(organization_list, dict):
        return []
    organizations = organization_list.get("organizationsLists")
    if not isinstance(organizations, list):
        return []
    return [item for item in organizations if isinstance(item, dict)]


def unique_organizations(pages: Iterable[dict[str, Any]]) -> list[dict[str, Any]]:
    """Deduplicate organizations across pages by ``naturalId``.

    Organizations without an identifier cannot be matched and are kept.
    """
    unique: list[dict[str, Any]] = []
    seen_ids: set[str] = set()
    for page in pages:
        for organization in page_organizations(page):
            natural_id = organization.get("naturalId")
            if natural_id is not None:
                key = to_text(natural_id)
                if key in seen_ids:
                    continue
                seen_ids.add(key)
            unique.append(organization)
    return unique


def parse_forbes_pages(
    pages: Iterable[dict[str, Any]],
    ranking_list: RankingList,
) -> list[AdvisorRecord]:
    """Convert raw API pages into advisor records.

    Args:
        pages: Raw page payloads.
        ranking_list: List metadata for publication and list names.

    Returns:
        One record per group member across unique organizations.
    """
    records: list[AdvisorRecord] = []
    for organization in unique_organizations(pages):
        records.extend(_organization_records(organization, ranking_list))
    return records


def answer_for(organization: dict[str, Any], question: str) -> str:
    """Return the answer to an exact Q&A question, or empty text."""
    qas = organization.get("qas")
    if not isinstance(qas, list):
        return ""
    for qa in qas:
        if isinstance(qa, dict) and qa.get("question") == question:
            return to_text(qa.get("answer"))
    return ""


def _organization_records(
    organization: dict[str, Any],
    ranking_list: RankingList,
) -> list[AdvisorRecord]:
    team_name = to_text(organization.get("organizationName"))
    parent = organization.get("parentCompany")
    firm = to_text(parent.get("name")) if isinstance(parent, dict) else ""
    rank, category = _primary_rank(organization)
    member_names = _member_names(organization) or [team_name]
    return [
        AdvisorRecord(
            name=member_name,
            team_name=team_name,
            firm=firm,
            state=to_text(organization.get("state")),
            city=to_text(organization.get("city")),
            rank=rank,
            category=category,
            team_assets=answer_for(organization, FORBES_QA_TEAM_ASSETS),
            min_account=answer_for(organization, FORBES_QA_MIN_ACCOUNT),
            typical_net_worth=answer_for(organization, FORBES_QA_NET_WORTH),
            typical_household=answer_for(organization, FORBES_QA_HOUSEHOLD),
            publication=ranking_list.publication,
            list_name=ranking_list.name,
        )
        for member_name in member_names
        if member_name
    ]


def _primary_rank(organization: dict[str, Any]) -> tuple[str, str]:
    industry_ranks = organization.get("industryRanks")
    if not isinstance(industry_ranks, list) or not industry_ranks:
        return "", ""
    first = industry_ranks[0]
    if not isinstance(first, dict):
        return "", ""
    return to_text(first.get("rank")), to_text(first.get("industry"))


def _member_names(organization: dict[str, Any]) -> list[str]:
    members = organization.get("groupMembers")
    if not isinstance(members, list):
        return []
    names = [
        to_text(member.get("name")).strip()
        for member in members
        if isinstance(member, dict)
    ]
    return [name for name in names if name]
