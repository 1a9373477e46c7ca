"""Article summarisation backed by the OpenAI chat completions API."""

from __future__ import annotations

import logging
import os

from hltvnews.models import NewsAnalysis

try:  # pragma: no cover - optional dependency during tests
    from openai import OpenAI
except ModuleNotFoundError:  # pragma: no cover - optional dependency during tests
    OpenAI = None  # type: ignore[assignment]

__all__ = ["DEFAULT_MODEL", "Summarizer", "summarize_article"]

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt-4o-mini"
MAX_CONTENT_CHARS = 4000

_client = None


def _get_client() -> "OpenAI":
    if OpenAI is None:  # pragma: no cover - runtime guard
        raise RuntimeError(
            "OpenAI client is not available. Install the 'openai' package and set OPENAI_API_KEY "
            "(either in the environment or in a .env file)."
        )

    global _client
    if _client is None:
        # hltvnews loads the project .env into os.environ on import.
        api_key = os.environ.get("OPENAI_API_KEY")
        try:
            _client = OpenAI(api_key=api_key) if api_key else OpenAI()
        except Exception as exc:
            raise RuntimeError(
                "Failed to initialise the OpenAI client. Ensure OPENAI_API_KEY is configured either in the "
                "environment or in a .env file."
            ) from exc

    return _client


def summarize_article(
    title: str, content: str, team: str, model: str = DEFAULT_MODEL
) -> NewsAnalysis:
    """Summarise a news article from the point of view of ``team``."""

    truncated = content[:MAX_CONTENT_CHARS] if content else ""

    messages = [
        {
            "role": "system",
            "content": (
                "You are an esports analyst preparing a Counter-Strike match preview. "
                "Summarise news articles in two or three sentences, keeping only facts that "
                "matter for the team's upcoming match: roster changes, form, injuries, "
                "stand-ins and statements from players or staff."
            ),
        },
        {
            "role": "user",
            "content": (
                "Summarise the following article for a preview of {team}'s next match.\n\n"
                "Title: {title}\n\nContent:\n{content}".format(
                    team=team,
                    title=title or "(untitled)",
                    content=truncated,
                )
            ),
        },
    ]

    logger.info("Summarizing article for %s: %s", team, title or "Untitled")
    client = _get_client()
    response = client.chat.completions.create(
        model=model,
        messages=messages,
        temperature=0.3,
    )

    return NewsAnalysis(summary=(response.choices[0].message.content or "").strip())


class Summarizer:
    """Callable summariser bound to a model name."""

    def __init__(self, model: str = DEFAULT_MODEL) -> None:
        self.model = model

    def __call__(self, title: str, content: str, team: str) -> NewsAnalysis:
        return summarize_article(title, content, team, model=self.model)
