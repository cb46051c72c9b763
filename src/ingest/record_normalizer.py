"""Field normalization helpers shared by publisher parsers.

This module expands AP-style state abbreviations, pulls display names
out of embedded links, and formats raw metric values as currency text.
"""

from __future__ import annotations

import re

STATE_ABBREVIATIONS = {
    "Ala.": "Alabama", "Alaska": "Alaska", "Ariz.": "Arizona", "Ark.": "Arkansas",
    "Calif.": "California", "Colo.": "Colorado", "Conn.": "Connecticut", "Del.": "Delaware",
    "D.C.": "Washington D.C.", "Fla.": "Florida", "Ga.": "Georgia", "Hawaii": "Hawaii",
    "Idaho": "Idaho", "Ill.": "Illinois", "Ind.": "Indiana", "Iowa": "Iowa",
    "Kan.": "Kansas", "Ky.": "Kentucky", "La.": "Louisiana", "Maine": "Maine",
    "Md.": "Maryland", "Mass.": "Massachusetts", "Mich.": "Michigan", "Minn.": "Minnesota",
    "Miss.": "Mississippi", "Mo.": "Missouri", "Mont.": "Montana", "Neb.": "Nebraska",
    "Nev.": "Nevada", "N.H.": "New Hampshire", "N.J.": "New Jersey", "N.M.": "New Mexico",
    "N.Y.": "New York", "N.C.": "North Carolina", "N.D.": "North Dakota", "Ohio": "Ohio",
    "Okla.": "Oklahoma", "Ore.": "Oregon", "Pa.": "Pennsylvania", "R.I.": "Rhode Island",
    "S.C.": "South Carolina", "S.D.": "South Dakota", "Tenn.": "Tennessee", "Texas": "Texas",
    "Utah": "Utah", "Vt.": "Vermont", "Va.": "Virginia", "Wash.": "Washington",
    "W.Va.": "West Virginia", "Wis.": "Wisconsin", "Wyo.": "Wyoming",
}

EN_DASH = "\u2013"

_LINK_TEXT_PATTERN = re.compile(r">([^<]+)<")


def to_text(value: object) -> str:
    """Coerce a raw JSON value into text, mapping None to empty."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


def expand_state(abbreviation: str) -> str:
    """Expand an AP-style state abbreviation.

    Args:
        abbreviation: Raw state token, e.g. ``Calif.``.

    Returns:
        Full state name, or the input unchanged when unknown.
    """
    return STATE_ABBREVIATIONS.get(abbreviation, abbreviation)


def extract_link_text(markup: str) -> str:
    """Return the inner text of the first embedded tag, else the raw value."""
    match = _LINK_TEXT_PATTERN.search(markup)
    if match is None:
        return markup
    return match.group(1)


def format_currency(value: object, suffix: str) -> str:
    """Format a raw numeric value as ``$<value><suffix>``.

    Args:
        value: Raw metric value from the source payload.
        suffix: Magnitude suffix such as ``M`` or ``B``.

    Returns:
        Formatted currency text, or empty when no value is present.
    """
    text = to_text(value).strip()
    if not text:
        return ""
    return f"${text}{suffix}"


def plain_dashes(text: str) -> str:
    """Replace en dashes, as decoded from ``&ndash;``, with plain hyphens."""
    return text.replace(EN_DASH, "-")


def split_city_state(location: str) -> tuple[str, str]:
    """Split ``City, State`` on the first ``", "`` separator.

    Returns:
        Pair of city and the remaining state portion.
    """
    parts = location.split(", ")
    return parts[0], ", ".join(parts[1:])
