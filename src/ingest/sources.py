"""Publisher list catalogue and fetch-and-parse pipelines.

Each publisher exposes one entry point taking a ``SourceContext`` and
returning normalized records. HTML lists are fetched fresh when possible
and read from the page cache when the fresh body is missing or too short.
A list that is unavailable both ways contributes zero records.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable

from core.constants import (
    ADVISORHUB_BASE_URL,
    ADVISORHUB_PUBLICATION,
    BARRONS_BASE_URL,
    BARRONS_PUBLICATION,
    FORBES_API_TEMPLATE,
    FORBES_PUBLICATION,
    INVESTMENTNEWS_BASE_URL,
    INVESTMENTNEWS_PUBLICATION,
    MIN_FIVE_STAR_PAGE_LENGTH,
    MIN_PAGE_LENGTH,
)
from core.logging_config import get_logger
from core.types import AdvisorRecord, PageStore, RankingList, TextFetcher
from ingest.advisorhub_parser import parse_advisorhub_table
from ingest.barrons_parser import parse_barrons_individuals, parse_barrons_teams, rank_years_for
from ingest.forbes_parser import parse_forbes_pages, walk_forbes_pages
from ingest.investmentnews_parser import parse_five_star_names, parse_hnw_disclosures

_LOGGER = get_logger(__name__)

_BARRONS_LISTS = (
    ("100", "Top 100 Advisors", "individual"),
    ("1200", "Top 1200 Advisors", "individual"),
    ("independent/100", "Top 100 Independent", "individual"),
    ("women/100", "Top 100 Women", "individual"),
    ("private-wealth", "Top 250 PW Teams", "teams"),
)
_ADVISORHUB_LISTS = (
    ("solo", "Advisors to Watch: Solo"),
    ("next-gen", "Advisors to Watch: Next Gen"),
    ("over-1b", "Advisors to Watch: Over $1B"),
    ("under-1b", "Advisors to Watch: Under $1B"),
    ("ria", "Advisors to Watch: RIA"),
)


@dataclass(frozen=True)
class SourceContext:
    """Collaborators and target year shared by publisher pipelines."""

    fetcher: TextFetcher
    cache: PageStore
    year: int


def forbes_list(year: int) -> RankingList:
    """Return the Forbes best-in-state list for the target year."""
    return RankingList(
        publication=FORBES_PUBLICATION,
        name=f"Best-in-State Teams {year}",
        url=FORBES_API_TEMPLATE.format(year=year),
        cache_key="forbes_page_0.json",
    )


def barrons_lists(year: int) -> tuple[RankingList, ...]:
    """Return the Barron's lists, published for the prior year."""
    period = year - 1
    return tuple(
        RankingList(
            publication=BARRONS_PUBLICATION,
            name=f"{title} {period}",
            url=f"{BARRONS_BASE_URL}/{slug}",
            cache_key=f"barrons_{slug.replace('/', '_')}.html",
            variant=variant,
        )
        for slug, title, variant in _BARRONS_LISTS
    )


def advisorhub_lists(year: int) -> tuple[RankingList, ...]:
    """Return the AdvisorHub "Advisors to Watch" lists."""
    period = year - 1
    lists: list[RankingList] = []
    for kind, title in _ADVISORHUB_LISTS:
        path = f"/advisors-to-watch-{kind}-{period}/"
        lists.append(
            RankingList(
                publication=ADVISORHUB_PUBLICATION,
                name=f"{title} {period}",
                url=ADVISORHUB_BASE_URL + path,
                cache_key="advisorhub_" + re.sub(r"[^a-z0-9]", "_", path) + ".html",
            )
        )
    return tuple(lists)


def investmentnews_lists(year: int) -> tuple[RankingList, RankingList]:
    """Return the HNW and 5-Star InvestmentNews lists with alternate URLs."""
    period = year - 1
    hnw = RankingList(
        publication=INVESTMENTNEWS_PUBLICATION,
        name=f"Top Independent HNW Advisors {period}",
        url=f"{INVESTMENTNEWS_BASE_URL}/hnw-advisors-{period}",
        cache_key="investmentnews_hnw.html",
        variant="disclosures",
        alternate_urls=(
            f"{INVESTMENTNEWS_BASE_URL}/hnw-advisors/",
            f"{INVESTMENTNEWS_BASE_URL}/awards/hnw-advisors-{period}/",
            f"{INVESTMENTNEWS_BASE_URL}/best-practices/hnw-advisors-{period}/",
        ),
    )
    five_star = RankingList(
        publication=INVESTMENTNEWS_PUBLICATION,
        name=f"5-Star Independent Advisors {period}",
        url=f"{INVESTMENTNEWS_BASE_URL}/five-star-independent-advisors-{period}/",
        cache_key="investmentnews_fivestar.html",
        variant="names",
        alternate_urls=(
            f"{INVESTMENTNEWS_BASE_URL}/awards/five-star-independent-advisors-{period}/",
            f"{INVESTMENTNEWS_BASE_URL}/five-star-independent-financial-advisors-{period}/",
        ),
    )
    return hnw, five_star


def load_list_page(
    context: SourceContext,
    ranking_list: RankingList,
    min_length: int = MIN_PAGE_LENGTH,
) -> str | None:
    """Fetch a list page, falling back to its cached copy.

    Args:
        context: Source collaborators.
        ranking_list: List whose URLs are tried in order.
        min_length: Shortest body accepted as a real page.

    Returns:
        Page markup, or None when neither a fresh nor a cached body exists.
    """
    for url in (ranking_list.url, *ranking_list.alternate_urls):
        body = context.fetcher.fetch_text(url)
        if body is not None and len(body) >= min_length:
            context.cache.write(ranking_list.cache_key, body)
            return body
    cached = context.cache.read(ranking_list.cache_key)
    if cached:
        _LOGGER.info("page_cache_used", list_name=ranking_list.name, key=ranking_list.cache_key)
        return cached
    _LOGGER.warning("list_unavailable", list_name=ranking_list.name, url=ranking_list.url)
    return None


def fetch_forbes_records(context: SourceContext) -> list[AdvisorRecord]:
    """Walk the Forbes API and explode teams into member records."""
    ranking_list = forbes_list(context.year)
    pages = walk_forbes_pages(context.fetcher, ranking_list.url, context.cache)
    records = parse_forbes_pages(pages, ranking_list)
    _log_list_parsed(ranking_list, len(records))
    return records


def fetch_barrons_records(context: SourceContext) -> list[AdvisorRecord]:
    """Fetch and parse every Barron's list."""
    rank_years = rank_years_for(context.year)
    records: list[AdvisorRecord] = []
    for ranking_list in barrons_lists(context.year):
        html = load_list_page(context, ranking_list)
        if html is None:
            continue
        if ranking_list.variant == "teams":
            list_records = parse_barrons_teams(html, ranking_list, rank_years)
        else:
            list_records = parse_barrons_individuals(html, ranking_list, rank_years)
        _log_list_parsed(ranking_list, len(list_records))
        records.extend(list_records)
    return records


def fetch_advisorhub_records(context: SourceContext) -> list[AdvisorRecord]:
    """Fetch and parse every AdvisorHub list."""
    records: list[AdvisorRecord] = []
    for ranking_list in advisorhub_lists(context.year):
        html = load_list_page(context, ranking_list)
        if html is None:
            continue
        list_records = parse_advisorhub_table(html, ranking_list)
        _log_list_parsed(ranking_list, len(list_records))
        records.extend(list_records)
    return records


def fetch_investmentnews_records(context: SourceContext) -> list[AdvisorRecord]:
    """Fetch the HNW firm list and harvest 5-Star advisor names."""
    hnw, five_star = investmentnews_lists(context.year)
    records: list[AdvisorRecord] = []
    hnw_html = load_list_page(context, hnw)
    if hnw_html is not None:
        hnw_records = parse_hnw_disclosures(hnw_html, hnw)
        _log_list_parsed(hnw, len(hnw_records))
        records.extend(hnw_records)
    five_star_html = load_list_page(context, five_star, MIN_FIVE_STAR_PAGE_LENGTH)
    if five_star_html is not None:
        five_star_records = parse_five_star_names(five_star_html, five_star)
        _log_list_parsed(five_star, len(five_star_records))
        records.extend(five_star_records)
    return records


PUBLISHER_SOURCES: dict[str, Callable[[SourceContext], list[AdvisorRecord]]] = {
    FORBES_PUBLICATION: fetch_forbes_records,
    BARRONS_PUBLICATION: fetch_barrons_records,
    ADVISORHUB_PUBLICATION: fetch_advisorhub_records,
    INVESTMENTNEWS_PUBLICATION: fetch_investmentnews_records,
}


def _log_list_parsed(ranking_list: RankingList, record_count: int) -> None:
    _LOGGER.info(
        "list_parsed",
        publication=ranking_list.publication,
        list_name=ranking_list.name,
        record_count=record_count,
    )
