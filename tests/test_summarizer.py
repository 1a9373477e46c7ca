from __future__ import annotations

from types import SimpleNamespace

from hltvnews.models import NewsAnalysis
from hltvnews.services import summarizer


def fake_client(reply: str, captured: dict):
    def create(**kwargs):
        captured.update(kwargs)
        message = SimpleNamespace(content=reply)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])

    return SimpleNamespace(chat=SimpleNamespace(completions=SimpleNamespace(create=create)))


def test_summarize_article_builds_team_prompt(monkeypatch) -> None:
    captured: dict = {}
    monkeypatch.setattr(summarizer, "_client", fake_client("  NAVI keep their lineup.  ", captured))

    result = summarizer.summarize_article("s1mple stays", "x" * 5000, "NAVI", model="demo-model")

    assert result == NewsAnalysis(summary="NAVI keep their lineup.")
    assert captured["model"] == "demo-model"
    user_message = captured["messages"][1]["content"]
    assert "NAVI's next match" in user_message
    assert "Title: s1mple stays" in user_message
    assert "x" * summarizer.MAX_CONTENT_CHARS in user_message
    assert "x" * (summarizer.MAX_CONTENT_CHARS + 1) not in user_message


def test_summarizer_callable_uses_configured_model(monkeypatch) -> None:
    calls = []

    def fake_summarize(title, content, team, model):
        calls.append((title, content, team, model))
        return NewsAnalysis(summary="ok")

    monkeypatch.setattr(summarizer, "summarize_article", fake_summarize)

    result = summarizer.Summarizer(model="demo-model")("Title", "Body", "FaZe")

    assert result.summary == "ok"
    assert calls == [("Title", "Body", "FaZe", "demo-model")]


def test_client_uses_api_key_from_environment(monkeypatch) -> None:
    created = []

    def fake_openai(**kwargs):
        created.append(kwargs)
        return SimpleNamespace()

    monkeypatch.setattr(summarizer, "_client", None)
    monkeypatch.setattr(summarizer, "OpenAI", fake_openai)
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")

    client = summarizer._get_client()

    assert created == [{"api_key": "sk-test"}]
    assert summarizer._get_client() is client
