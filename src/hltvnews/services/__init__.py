"""Service layer entry points for HLTV match news."""

from __future__ import annotations

from .browser import BrowserSession, Document  # noqa: F401
from .cache import ArticleCache  # noqa: F401
from .headlines import HeadlineDiscovery  # noqa: F401
from .relevance import is_relevant  # noqa: F401
from .repo import ArticleRepo, ArticleStore  # noqa: F401
from .summarizer import Summarizer, summarize_article  # noqa: F401

__all__ = [
    "ArticleCache",
    "ArticleRepo",
    "ArticleStore",
    "BrowserSession",
    "Document",
    "HeadlineDiscovery",
    "Summarizer",
    "is_relevant",
    "summarize_article",
]
