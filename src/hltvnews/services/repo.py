"""Repository resolving the news articles relevant to a match between two teams."""

from __future__ import annotations

import logging
import threading
from typing import Callable, Iterator, List, Optional, Sequence

from hltvnews.config import ScraperConfig
from hltvnews.exceptions import ArticleTitleMissingError
from hltvnews.models import (
    Article,
    CacheRecord,
    CandidateHeadline,
    FetchOutcome,
    FetchReport,
    NewsAnalysis,
)
from hltvnews.services.browser import Document, Navigator
from hltvnews.services.cache import ArticleCache
from hltvnews.services.headlines import HeadlineDiscovery

__all__ = ["ArticleRepo", "ArticleStore"]

logger = logging.getLogger(__name__)

WAIT_FOR = "article.newsitem"
ARTICLE_TITLE = "h1.headline"
ARTICLE_CONTENT = ".newstext-con p"

SummarizeFn = Callable[[str, str, str], NewsAnalysis]


class ArticleStore:
    """Append-only collection of every article resolved so far."""

    def __init__(self, articles: Sequence[Article] = ()) -> None:
        self._articles: List[Article] = list(articles)

    def __len__(self) -> int:
        return len(self._articles)

    def __iter__(self) -> Iterator[Article]:
        return iter(list(self._articles))

    def append(self, article: Article) -> None:
        self._articles.append(article)

    def has_any(self, teams: Sequence[str]) -> bool:
        return any(article.primary_team in teams for article in self._articles)

    def for_teams(self, teams: Sequence[str]) -> List[Article]:
        return [article for article in self._articles if article.primary_team in teams]


class ArticleRepo:
    """Find, summarise and cache the articles for the teams of a match.

    All page loads go through one browser session and happen strictly one
    after another: teams are processed in order, and candidates within a team
    in order.  ``find_by_teams`` holds a lock so concurrent callers queue
    instead of interleaving navigations.
    """

    def __init__(
        self,
        session: Navigator,
        summarize: SummarizeFn,
        *,
        config: ScraperConfig | None = None,
        cache: ArticleCache | None = None,
        discovery: HeadlineDiscovery | None = None,
        store: ArticleStore | None = None,
    ) -> None:
        self.config = config or ScraperConfig()
        self.session = session
        self.summarize = summarize
        self.cache = cache or ArticleCache(self.config.cache_dir)
        self.discovery = discovery or HeadlineDiscovery(session)
        self.store = store if store is not None else ArticleStore()
        self.last_report: Optional[FetchReport] = None
        self._lock = threading.Lock()

    def find_by_teams(self, teams: Sequence[str]) -> List[Article]:
        """Return the articles associated with ``teams``.

        Once the store holds an article for any of the teams, the stored
        articles are returned without discovering anything, even when the
        other team has none.
        """

        teams = list(teams)
        if len(teams) < 2:
            raise ValueError("At least two teams are required to look up match articles")

        with self._lock:
            if self.store.has_any(teams):
                logger.debug("Returning stored articles for %s", teams)
                return self.store.for_teams(teams)

            report = FetchReport(teams=teams)
            self.last_report = report

            if self.config.bulk_cache_mode:
                self._load_cached(teams, report)
            else:
                self._fetch_from_match_teams(teams, report)

            return self.store.for_teams(teams)

    def _load_cached(self, teams: Sequence[str], report: FetchReport) -> None:
        for team in teams:
            for cached_team, title, record in self.cache.list_all(team):
                article = Article(title=title, summary=record.summary, primary_team=cached_team)
                self.store.append(article)
                report.add(
                    FetchOutcome(
                        team=cached_team, status="bulk", title=title, url=record.url, article=article
                    )
                )

        logger.info("Returning cached articles for %s", teams)

    def _fetch_from_match_teams(self, teams: Sequence[str], report: FetchReport) -> None:
        limit = self.config.headline_limit
        for team in teams:
            headlines = self.discovery.discover(team, limit=limit)
            logger.info(
                "Articles list for %s: %s", team, [headline.title for headline in headlines]
            )

            for headline in headlines:
                outcome = self._resolve(headline, team)
                report.add(outcome)
                if outcome.article is not None:
                    self.store.append(outcome.article)

    def _resolve(self, headline: CandidateHeadline, team: str) -> FetchOutcome:
        """Turn one headline into an outcome; never raises for live fetch failures."""

        if not headline.title:
            return FetchOutcome(
                team=team, status="skipped", url=headline.url, reason="Article without a title"
            )

        if self.config.cache and self.cache.has(team, headline.title):
            record = self.cache.read(team, headline.title)
            logger.debug("Returning cached file for article %s", headline.url)
            article = Article(title=headline.title, summary=record.summary, primary_team=team)
            return FetchOutcome(
                team=team, status="cached", title=headline.title, url=headline.url, article=article
            )

        try:
            article = self.fetch_one(headline, team)
        except Exception as exc:  # noqa: BLE001 - timeouts and ads posing as headlines
            logger.warning("Skipping article %s for %s: %s", headline.url, team, exc)
            return FetchOutcome(
                team=team,
                status="skipped",
                title=headline.title,
                url=headline.url,
                reason=str(exc) or exc.__class__.__name__,
            )

        return FetchOutcome(
            team=team, status="fetched", title=article.title, url=headline.url, article=article
        )

    def fetch_one(self, headline: CandidateHeadline, team: str) -> Article:
        """Load the article page, summarise it and cache the summary."""

        document = self.session.navigate(headline.url, WAIT_FOR)
        title = self.get_title(document)
        content = self.get_content(document)
        analysis = self.summarize(title, content, team)

        if self.config.cache:
            self.cache.write(
                team,
                headline.title or title,
                CacheRecord(summary=analysis.summary, title=title, team=team, url=headline.url),
            )

        return Article(title=title, summary=analysis.summary, primary_team=team)

    @staticmethod
    def get_title(document: Document) -> str:
        element = document.query_one(ARTICLE_TITLE)
        title = element.text().strip() if element is not None else ""
        if not title:
            raise ArticleTitleMissingError(document.url)
        return title

    @staticmethod
    def get_content(document: Document) -> str:
        return "\n\n".join(paragraph.text().strip() for paragraph in document.query(ARTICLE_CONTENT))
