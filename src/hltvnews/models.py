"""Domain models used across the application."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class Article(BaseModel):
    """A summarised news article fetched on behalf of one team."""

    model_config = ConfigDict(frozen=True)

    title: str
    summary: str
    primary_team: str = Field(..., description="Team the article was fetched under")


class NewsAnalysis(BaseModel):
    """Result returned by the summariser."""

    summary: str


class CacheRecord(BaseModel):
    """Structured record persisted for each summarised article."""

    model_config = ConfigDict(extra="allow")

    summary: str
    title: Optional[str] = None
    team: Optional[str] = None
    url: Optional[str] = None
    cached_at: Optional[datetime] = None


@dataclass(slots=True, frozen=True)
class HeadlineAnchor:
    """Raw ``(title, href)`` pair read from a team's news tab."""

    title: Optional[str]
    href: Optional[str]


@dataclass(slots=True, frozen=True)
class CandidateHeadline:
    """A relevant headline pointing at an article page."""

    url: str
    title: Optional[str]


OutcomeStatus = Literal["cached", "fetched", "skipped", "bulk"]


@dataclass(slots=True)
class FetchOutcome:
    """What happened to a single candidate during an orchestration run."""

    team: str
    status: OutcomeStatus
    title: Optional[str] = None
    url: Optional[str] = None
    reason: Optional[str] = None
    article: Optional[Article] = None


@dataclass(slots=True)
class FetchReport:
    """Ordered outcomes collected while resolving articles for a set of teams."""

    teams: List[str]
    outcomes: List[FetchOutcome] = field(default_factory=list)

    def add(self, outcome: FetchOutcome) -> None:
        self.outcomes.append(outcome)

    @property
    def articles(self) -> List[Article]:
        return [outcome.article for outcome in self.outcomes if outcome.article is not None]

    @property
    def skipped(self) -> List[FetchOutcome]:
        return [outcome for outcome in self.outcomes if outcome.status == "skipped"]


__all__ = [
    "Article",
    "CacheRecord",
    "CandidateHeadline",
    "FetchOutcome",
    "FetchReport",
    "HeadlineAnchor",
    "NewsAnalysis",
    "OutcomeStatus",
]
