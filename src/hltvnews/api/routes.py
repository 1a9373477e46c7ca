"""API routes exposing article discovery and the summary cache."""

from __future__ import annotations

import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List, TypeVar

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel, Field

from hltvnews.config import ScraperConfig
from hltvnews.exceptions import CacheCorruptError, TeamNotFoundError
from hltvnews.models import Article
from hltvnews.services.browser import BrowserSession
from hltvnews.services.cache import ArticleCache
from hltvnews.services.repo import ArticleRepo
from hltvnews.services.summarizer import Summarizer

logger = logging.getLogger(__name__)

router = APIRouter()

T = TypeVar("T")

# Playwright objects must stay on the thread that created them, and the
# repository must not be re-entered, so every repository call runs here.
_browser_executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="hltvnews-browser")
_repository: ArticleRepo | None = None


class SkippedArticle(BaseModel):
    team: str
    url: str | None = None
    title: str | None = None
    reason: str | None = None


class ArticlesResponse(BaseModel):
    teams: List[str]
    articles: List[Article] = Field(default_factory=list)
    skipped: List[SkippedArticle] = Field(default_factory=list)


class CachedArticle(BaseModel):
    team: str
    title: str
    summary: str
    url: str | None = None


class CachedArticlesResponse(BaseModel):
    articles: List[CachedArticle] = Field(default_factory=list)


def get_repository() -> ArticleRepo:
    """Return the process-wide repository, creating it on first use."""

    global _repository
    if _repository is None:
        config = ScraperConfig.load()
        session = BrowserSession(headless=config.headless)
        _repository = ArticleRepo(session, Summarizer(config.model), config=config)
    return _repository


async def run_in_browser_thread(func: Callable[..., T], *args) -> T:
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(_browser_executor, func, *args)


async def shutdown_repository() -> None:
    """Close the browser owned by the repository, if one was started."""

    global _repository
    if _repository is None:
        return
    session = _repository.session
    _repository = None
    if isinstance(session, BrowserSession):
        await run_in_browser_thread(session.close)


@router.get("/articles", response_model=ArticlesResponse)
async def find_articles(teams: List[str] = Query(default=[])) -> ArticlesResponse:
    """Return relevant, summarised articles for the teams of a match."""

    requested = [team.strip() for team in teams if team.strip()]
    if len(requested) < 2:
        raise HTTPException(status_code=400, detail="Provide two teams, e.g. ?teams=NAVI&teams=FaZe")

    repo = get_repository()
    try:
        articles = await run_in_browser_thread(repo.find_by_teams, requested)
    except TeamNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except CacheCorruptError as exc:
        logger.exception("Article cache is corrupt")
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    except Exception as exc:  # pragma: no cover - defensive guard for browser/API failures
        logger.exception("Failed to find articles for %s", requested)
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    skipped: List[SkippedArticle] = []
    report = repo.last_report
    if report is not None and report.teams == requested:
        skipped = [
            SkippedArticle(team=entry.team, url=entry.url, title=entry.title, reason=entry.reason)
            for entry in report.skipped
        ]

    return ArticlesResponse(teams=requested, articles=articles, skipped=skipped)


@router.get("/articles/cached", response_model=CachedArticlesResponse)
async def list_cached_articles(team: str | None = None) -> CachedArticlesResponse:
    """Return the summaries stored in the cache directory without browsing."""

    cache = ArticleCache(ScraperConfig.load().cache_dir)
    try:
        entries = cache.list_all(team)
    except CacheCorruptError as exc:
        logger.exception("Article cache is corrupt")
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    return CachedArticlesResponse(
        articles=[
            CachedArticle(team=entry_team, title=title, summary=record.summary, url=record.url)
            for entry_team, title, record in entries
        ]
    )
