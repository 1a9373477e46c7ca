"""Keep/drop decision for headlines found on a team's news tab."""

from __future__ import annotations

from typing import Optional, Sequence

from hltvnews.models import HeadlineAnchor

__all__ = ["EXCLUDED_URL_SUFFIXES", "EXCLUDED_URL_TERMS", "is_relevant"]

# Links to pages that are not news about the team.
EXCLUDED_URL_TERMS = (
    "former-00nation",
    "invited",
    "fantasy",
    "announced",
    "schedule",
    "team-list",
    "live-updates",
    "short",
    # unrelated to the major
    "bestia",
)

# ``guide`` covers general event guides.
EXCLUDED_URL_SUFFIXES = ("revealed", "guide")


def is_relevant(team: str, roster: Sequence[Optional[str]], anchor: HeadlineAnchor) -> bool:
    """Return ``True`` when ``anchor`` is news about ``team`` or one of its members.

    The team name is matched case-sensitively against the title, unlike the
    case-insensitive lookup used to find the team page.
    """

    title, href = anchor.title, anchor.href
    if not title or not href:
        return False

    if any(term in href for term in EXCLUDED_URL_TERMS):
        return False
    if href.endswith(EXCLUDED_URL_SUFFIXES):
        return False

    if team in title:
        return True
    return any(isinstance(member, str) and member and member in title for member in roster)
