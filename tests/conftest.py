from __future__ import annotations

from typing import Callable, Dict, List, Union

import pytest

from hltvnews.services.browser import Document

PageSource = Union[str, Exception, Callable[[], str]]


class FakeSession:
    """Serves canned HTML per URL and records every navigation."""

    def __init__(self, pages: Dict[str, PageSource] | None = None) -> None:
        self.pages: Dict[str, PageSource] = dict(pages or {})
        self.calls: List[tuple[str, str]] = []

    def navigate(self, url: str, ready_selector: str) -> Document:
        self.calls.append((url, ready_selector))
        try:
            source = self.pages[url]
        except KeyError:
            raise AssertionError(f"Unexpected navigation to {url}") from None
        if isinstance(source, Exception):
            raise source
        html = source() if callable(source) else source
        return Document(html, url=url)


def article_page(title: str, *paragraphs: str) -> str:
    body = "".join(f"<p>{paragraph}</p>" for paragraph in paragraphs)
    return (
        "<html><body><article class=\"newsitem\">"
        f"<h1 class=\"headline\">{title}</h1>"
        f"<div class=\"newstext-con\">{body}</div>"
        "</article></body></html>"
    )


@pytest.fixture
def fake_session() -> FakeSession:
    return FakeSession()
