"""Errors raised while discovering, fetching and caching articles."""

from __future__ import annotations

__all__ = [
    "ArticleTitleMissingError",
    "CacheCorruptError",
    "HLTVNewsError",
    "NavigationError",
    "TeamNotFoundError",
]


class HLTVNewsError(Exception):
    """Base class for all errors raised by :mod:`hltvnews`."""


class TeamNotFoundError(HLTVNewsError):
    """The HLTV search returned no team whose name matches the request."""

    def __init__(self, team: str) -> None:
        super().__init__(f"No HLTV team named '{team}' was found")
        self.team = team


class ArticleTitleMissingError(HLTVNewsError):
    """An article page was loaded but has no headline element."""

    def __init__(self, url: str) -> None:
        super().__init__(f"Article title not found at {url}")
        self.url = url


class CacheCorruptError(HLTVNewsError):
    """A cached record exists on disk but cannot be parsed."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Cached article at {path} is invalid: {reason}")
        self.path = path


class NavigationError(HLTVNewsError):
    """The browser failed to load a page or the ready selector never appeared."""
