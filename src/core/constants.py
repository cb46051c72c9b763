"""Core constants used across Laurel modules.

This module centralizes publisher identifiers, endpoints, and limits.
Keeping values here avoids magic literals in parsing and merge logic.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_OUTPUT_DIR = Path(".")
DEFAULT_CACHE_DIR = Path(".cache")
DEFAULT_HTTP_TIMEOUT_SECONDS = 60.0
SNAPSHOT_FILE_NAME = "advisor-data.js"
ARCHIVE_DIR_NAME = "data"
YEARS_MANIFEST_FILE_NAME = "years.json"
SNAPSHOT_SCRIPT_PREFIX = "const RAW_DATA="
SNAPSHOT_SCRIPT_SUFFIX = ";"
SNAPSHOT_ROW_ARITY = 15

FORBES_PUBLICATION = "Forbes/SHOOK"
BARRONS_PUBLICATION = "Barron's"
ADVISORHUB_PUBLICATION = "AdvisorHub"
INVESTMENTNEWS_PUBLICATION = "InvestmentNews"
PUBLICATION_ORDER = (
    FORBES_PUBLICATION,
    BARRONS_PUBLICATION,
    ADVISORHUB_PUBLICATION,
    INVESTMENTNEWS_PUBLICATION,
)

BROWSER_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/131.0.0.0 Safari/537.36"
)
MIN_PAGE_LENGTH = 1000
MIN_FIVE_STAR_PAGE_LENGTH = 2001

FORBES_API_TEMPLATE = (
    "https://www.forbes.com/forbesapi/org/wealth-management-teams-best-in-state/"
    "{year}/position/true.json"
)
FORBES_PAGE_SIZE = 200
FORBES_MAX_PAGES = 100
FORBES_QA_TEAM_ASSETS = "Team Assets"
FORBES_QA_MIN_ACCOUNT = "Minimum account size for new business"
FORBES_QA_NET_WORTH = "Typical Net Worth of Relationships"
FORBES_QA_HOUSEHOLD = "Typical size of Household accounts"

BARRONS_BASE_URL = "https://www.barrons.com/advisor/report/top-financial-advisors"
BARRONS_INDIVIDUAL_SUFFIX = "M"
BARRONS_TEAM_SUFFIX = "B"

ADVISORHUB_BASE_URL = "https://www.advisorhub.com"
ADVISORHUB_TABLE_ATTRIBUTE = "wpdatatable_id"
ADVISORHUB_NAME_HEADERS = ("Full Name 1", "PREV NAME", "Name")
ADVISORHUB_RANK_HEADERS = ("Rank", "Ranking")

INVESTMENTNEWS_BASE_URL = "https://www.investmentnews.com"
FIVE_STAR_NAME_MIN_LENGTH = 5
FIVE_STAR_NAME_MAX_LENGTH = 50
