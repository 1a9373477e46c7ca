"""Discovery of recent HLTV headlines for a single team."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence
from urllib.parse import quote, urljoin

from hltvnews.exceptions import TeamNotFoundError
from hltvnews.models import CandidateHeadline, HeadlineAnchor
from hltvnews.services.browser import Document, Navigator
from hltvnews.services.relevance import is_relevant

__all__ = [
    "BASE_URL",
    "HeadlineDiscovery",
    "OVERFETCH_FACTOR",
    "select_headlines",
]

logger = logging.getLogger(__name__)

BASE_URL = "https://www.hltv.org"

SELECTOR_SEARCH = 'td a[href^="/team"]'
WAIT_FOR_SEARCH = ".contentCol"

SELECTOR_MEMBERS = '.bodyshot-team a[href^="/player"]'
SELECTOR_COACH = '.profile-team-stat a[href^="/coach"] .a-default'

SELECTOR_HEADLINES = "a.subTab-newsArticle"
WAIT_FOR_TEAM = ".contentCol"

# Most headlines on a team page are filtered out, so read several times more
# anchors than the number of articles requested.
OVERFETCH_FACTOR = 6


def select_headlines(
    team: str,
    roster: Sequence[Optional[str]],
    anchors: Iterable[HeadlineAnchor],
    limit: int,
    *,
    base_url: str = BASE_URL,
) -> List[CandidateHeadline]:
    """Filter ``anchors`` for relevance and keep the first ``limit`` in order."""

    selected: List[CandidateHeadline] = []
    for anchor in anchors:
        if not is_relevant(team, roster, anchor):
            continue
        selected.append(CandidateHeadline(url=urljoin(base_url, anchor.href or ""), title=anchor.title))

    return selected[:limit]


class HeadlineDiscovery:
    """Turn a team name into a short list of relevant HLTV headlines."""

    def __init__(self, session: Navigator, *, base_url: str = BASE_URL) -> None:
        self._session = session
        self.base_url = base_url.rstrip("/")

    def resolve_team_page(self, team: str) -> str:
        """Return the profile path (``/team/<id>/<slug>``) of ``team``."""

        document = self._session.navigate(
            f"{self.base_url}/search?query={quote(team)}", WAIT_FOR_SEARCH
        )

        wanted = team.lower()
        for link in document.query(SELECTOR_SEARCH):
            if link.text().strip().lower() != wanted:
                continue
            href = link.attribute("href")
            if href:
                return href
            break

        raise TeamNotFoundError(team)

    @staticmethod
    def extract_roster(document: Document) -> List[str]:
        """Return player names followed by the coach, when the page lists one."""

        members = [
            name
            for name in (anchor.attribute("title") for anchor in document.query(SELECTOR_MEMBERS))
            if name
        ]

        coach = document.query_one(SELECTOR_COACH)
        if coach is not None:
            name = coach.text().replace("'", "").strip()
            if name:
                members.append(name)

        return members

    @staticmethod
    def extract_anchors(document: Document, max_anchors: int) -> List[HeadlineAnchor]:
        """Read ``(title, href)`` pairs for the first ``max_anchors`` news links.

        Each anchor renders a category label on its first line and the
        headline on the second.
        """

        anchors: List[HeadlineAnchor] = []
        for element in document.query(SELECTOR_HEADLINES)[:max_anchors]:
            lines = element.lines()
            title = lines[1] if len(lines) > 1 else None
            anchors.append(HeadlineAnchor(title=title, href=element.attribute("href")))
        return anchors

    def discover(self, team: str, limit: int = 10) -> List[CandidateHeadline]:
        """Return up to ``limit`` relevant headlines for ``team``, newest first.

        Raises :class:`~hltvnews.exceptions.TeamNotFoundError` when the search
        has no exact (case-insensitive) match for ``team``.
        """

        logger.info("Fetching HLTV headlines for team %s", team)
        team_page = self.resolve_team_page(team)

        document = self._session.navigate(
            f"{self.base_url}{team_page}#tab-newsBox", WAIT_FOR_TEAM
        )
        roster = self.extract_roster(document)
        anchors = self.extract_anchors(document, limit * OVERFETCH_FACTOR)

        headlines = select_headlines(team, roster, anchors, limit, base_url=self.base_url)
        logger.info(
            "Kept %d of %d headlines for %s (roster: %s)",
            len(headlines),
            len(anchors),
            team,
            ", ".join(roster) or "unknown",
        )
        return headlines
