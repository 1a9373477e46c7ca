"""Tests for :mod:`hltvnews.api.routes`."""

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace
from unittest.mock import patch

from fastapi.testclient import TestClient

from hltvnews.api.app import create_app
from hltvnews.config import ScraperConfig
from hltvnews.exceptions import CacheCorruptError, TeamNotFoundError
from hltvnews.models import Article, CacheRecord, FetchOutcome, FetchReport
from hltvnews.services.cache import ArticleCache


def fake_repository(result=None, error: Exception | None = None, report: FetchReport | None = None):
    calls: list[list[str]] = []

    def find_by_teams(teams):
        calls.append(list(teams))
        if error is not None:
            raise error
        return result or []

    return SimpleNamespace(find_by_teams=find_by_teams, last_report=report, calls=calls)


def test_find_articles_returns_articles_and_skips() -> None:
    article = Article(title="s1mple opens up", summary="Staying.", primary_team="NAVI")
    report = FetchReport(
        teams=["NAVI", "FaZe"],
        outcomes=[
            FetchOutcome(team="NAVI", status="fetched", title=article.title, article=article),
            FetchOutcome(team="FaZe", status="skipped", url="https://www.hltv.org/news/2/x", reason="Timeout"),
        ],
    )
    repo = fake_repository([article], report=report)

    client = TestClient(create_app())
    with patch("hltvnews.api.routes.get_repository", return_value=repo):
        response = client.get("/api/articles", params=[("teams", "NAVI"), ("teams", "FaZe")])

    assert response.status_code == 200
    payload = response.json()
    assert payload["teams"] == ["NAVI", "FaZe"]
    assert payload["articles"] == [
        {"title": "s1mple opens up", "summary": "Staying.", "primary_team": "NAVI"}
    ]
    assert payload["skipped"][0]["reason"] == "Timeout"
    assert repo.calls == [["NAVI", "FaZe"]]


def test_find_articles_requires_two_teams() -> None:
    client = TestClient(create_app())

    with patch("hltvnews.api.routes.get_repository") as mock_get:
        response = client.get("/api/articles", params={"teams": "NAVI"})

    assert response.status_code == 400
    mock_get.assert_not_called()


def test_find_articles_unknown_team_is_404() -> None:
    repo = fake_repository(error=TeamNotFoundError("Ghosts"))

    client = TestClient(create_app())
    with patch("hltvnews.api.routes.get_repository", return_value=repo):
        response = client.get("/api/articles", params=[("teams", "NAVI"), ("teams", "Ghosts")])

    assert response.status_code == 404
    assert "Ghosts" in response.json()["detail"]


def test_find_articles_corrupt_cache_is_500() -> None:
    repo = fake_repository(error=CacheCorruptError("articles-cached/NAVI-x.json", "invalid JSON"))

    client = TestClient(create_app())
    with patch("hltvnews.api.routes.get_repository", return_value=repo):
        response = client.get("/api/articles", params=[("teams", "NAVI"), ("teams", "FaZe")])

    assert response.status_code == 500


def test_list_cached_articles(tmp_path: Path) -> None:
    cache = ArticleCache(tmp_path)
    cache.write("NAVI", "First", CacheRecord(summary="one", url="https://www.hltv.org/news/1/first"))
    cache.write("FaZe", "Second", CacheRecord(summary="two"))

    client = TestClient(create_app())
    with patch("hltvnews.api.routes.ScraperConfig.load", return_value=ScraperConfig(cache_dir=tmp_path)):
        response = client.get("/api/articles/cached", params={"team": "NAVI"})

    assert response.status_code == 200
    assert response.json()["articles"] == [
        {"team": "NAVI", "title": "First", "summary": "one", "url": "https://www.hltv.org/news/1/first"}
    ]
