"""Configuration model and helpers for the HLTV article scraper."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Mapping

from pydantic import BaseModel, Field, ValidationError

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "ScraperConfig",
]

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[2] / "data" / "settings.json"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


def _parse_flag(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ValueError(f"Environment variable {name} must be a boolean, got {raw!r}")


class ScraperConfig(BaseModel):
    """Options controlling discovery, caching and summarisation."""

    cache: bool = Field(default=True, description="Read and write cached article summaries")
    look_for_new_articles: bool = Field(
        default=True,
        description=(
            "Discover and fetch new articles. When disabled while caching is enabled, "
            "articles are rebuilt purely from the cache directory."
        ),
    )
    cache_dir: Path | None = Field(
        default=None,
        description="Directory holding cached summaries. Defaults to ./articles-cached",
    )
    headline_limit: int = Field(default=10, ge=1, description="Articles kept per team")
    headless: bool = Field(default=True, description="Run the browser without a window")
    model: str = Field(default="gpt-4o-mini", description="OpenAI model used for summaries")

    @property
    def bulk_cache_mode(self) -> bool:
        """Return ``True`` when articles should only be loaded from the cache."""

        return self.cache and not self.look_for_new_articles

    @classmethod
    def from_file(cls, path: Path | str | None = None) -> "ScraperConfig":
        """Load configuration data from a JSON file."""

        config_path = Path(path) if path else DEFAULT_CONFIG_PATH
        try:
            data = json.loads(config_path.read_text(encoding="utf-8"))
        except FileNotFoundError as exc:
            raise FileNotFoundError(f"Configuration file not found: {config_path}") from exc
        except json.JSONDecodeError as exc:
            raise ValueError(f"Invalid JSON in configuration file: {config_path}") from exc

        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise ValueError(f"Configuration file is invalid: {config_path}\n{exc}") from exc

    @classmethod
    def load(
        cls, path: Path | str | None = None, *, environ: Mapping[str, str] | None = None
    ) -> "ScraperConfig":
        """Load the settings file if present and apply environment overrides.

        ``CACHE`` and ``LOOK_FOR_NEW_ARTICLES`` override the boolean switches and
        ``HLTVNEWS_CACHE_DIR`` overrides the cache directory.
        """

        env = os.environ if environ is None else environ
        config_path = Path(path) if path else DEFAULT_CONFIG_PATH

        if path is not None or config_path.exists():
            config = cls.from_file(config_path)
        else:
            config = cls()

        overrides: dict[str, object] = {}
        if "CACHE" in env:
            overrides["cache"] = _parse_flag("CACHE", env["CACHE"])
        if "LOOK_FOR_NEW_ARTICLES" in env:
            overrides["look_for_new_articles"] = _parse_flag(
                "LOOK_FOR_NEW_ARTICLES", env["LOOK_FOR_NEW_ARTICLES"]
            )
        if env.get("HLTVNEWS_CACHE_DIR"):
            overrides["cache_dir"] = Path(env["HLTVNEWS_CACHE_DIR"])

        if not overrides:
            return config
        return config.model_copy(update=overrides)

    def dump(self, path: Path | str | None = None) -> None:
        """Persist the configuration back to disk as JSON."""

        config_path = Path(path) if path else DEFAULT_CONFIG_PATH
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(self.model_dump_json(indent=2), encoding="utf-8")
