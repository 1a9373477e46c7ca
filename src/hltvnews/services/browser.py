"""Playwright-backed browser session that hands out static page snapshots."""

from __future__ import annotations

import logging
import threading
from typing import List, Optional, Protocol

from bs4 import BeautifulSoup, Comment, NavigableString, Tag
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import sync_playwright

from hltvnews.exceptions import NavigationError

__all__ = ["BrowserSession", "Document", "Element", "HEADERS", "Navigator"]

logger = logging.getLogger(__name__)

HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:129.0) "
        "Gecko/20100101 Firefox/129.0"
    ),
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.9",
}

NAVIGATION_TIMEOUT_MS = 60_000


class Element:
    """Read-only view over a single node of a :class:`Document`."""

    def __init__(self, tag: Tag) -> None:
        self._tag = tag

    def text(self) -> str:
        """Return the concatenated text content of the node."""

        return self._tag.get_text()

    def lines(self) -> List[str]:
        """Return one line per direct child, keeping inline markup on its line."""

        lines: List[str] = []
        for child in self._tag.children:
            if isinstance(child, Tag):
                text = child.get_text(" ", strip=True)
            elif isinstance(child, NavigableString) and not isinstance(child, Comment):
                text = " ".join(child.split())
            else:
                continue
            if text:
                lines.append(text)
        return lines

    def attribute(self, name: str) -> Optional[str]:
        value = self._tag.get(name)
        if value is None:
            return None
        if isinstance(value, list):
            return " ".join(value)
        return str(value)


class Document:
    """Snapshot of a loaded page that can be queried with CSS selectors.

    The snapshot is detached from the browser, so any number of queries can be
    made without touching the session.
    """

    def __init__(self, html: str, url: str = "") -> None:
        self.url = url
        self._soup = BeautifulSoup(html, "lxml")

    def query(self, selector: str) -> List[Element]:
        return [Element(tag) for tag in self._soup.select(selector)]

    def query_one(self, selector: str) -> Optional[Element]:
        tag = self._soup.select_one(selector)
        return Element(tag) if tag is not None else None


class Navigator(Protocol):
    """Anything that can load a URL and return a queryable snapshot."""

    def navigate(self, url: str, ready_selector: str) -> Document: ...


class BrowserSession:
    """A single browser page shared by every navigation.

    The page is stateful (cookies, bot checks), so navigations must never
    overlap.  ``navigate`` holds a one-slot lock for the whole load.  Playwright
    objects are bound to the thread that created them; callers must use the
    session from one thread.
    """

    def __init__(
        self,
        *,
        headless: bool = True,
        timeout_ms: int = NAVIGATION_TIMEOUT_MS,
    ) -> None:
        self.headless = headless
        self.timeout_ms = timeout_ms
        self._slot = threading.Lock()
        self._playwright = None
        self._browser = None
        self._context = None
        self._page = None

    def __enter__(self) -> "BrowserSession":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _ensure_page(self):
        if self._page is None:
            self._playwright = sync_playwright().start()
            self._browser = self._playwright.firefox.launch(headless=self.headless)
            self._context = self._browser.new_context(extra_http_headers=HEADERS)
            self._page = self._context.new_page()
        return self._page

    def navigate(self, url: str, ready_selector: str) -> Document:
        """Load ``url``, wait for ``ready_selector`` and return a snapshot."""

        with self._slot:
            logger.debug("Navigating to %s", url)
            try:
                page = self._ensure_page()
                page.goto(url, wait_until="domcontentloaded", timeout=self.timeout_ms)
                page.wait_for_selector(ready_selector, timeout=self.timeout_ms)
                html = page.content()
                current_url = page.url
            except PlaywrightError as exc:
                raise NavigationError(f"Failed to load {url}: {exc}") from exc

        return Document(html, url=current_url)

    def close(self) -> None:
        """Shut down the browser if it was started."""

        with self._slot:
            try:
                if self._context is not None:
                    self._context.close()
                if self._browser is not None:
                    self._browser.close()
                if self._playwright is not None:
                    self._playwright.stop()
            finally:
                self._page = None
                self._context = None
                self._browser = None
                self._playwright = None
