"""Filesystem cache of article summaries keyed by team and article title."""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime
from pathlib import Path
from typing import List, Optional, Tuple

from pydantic import ValidationError

from hltvnews.blobstore import ensure_cache_root, resolve_cache_root
from hltvnews.exceptions import CacheCorruptError
from hltvnews.models import CacheRecord

__all__ = [
    "ArticleCache",
    "CACHE_SUFFIX",
    "decode_filename",
    "encode_filename",
]

logger = logging.getLogger(__name__)

CACHE_SUFFIX = ".json"
SEPARATOR = "-"

# Titles may contain "/", which would otherwise create sub-directories.
_SLASH = "/"
_SLASH_SUBSTITUTE = "∕"


def encode_filename(team: str, title: str) -> str:
    """Return the cache filename for ``(team, title)``."""

    safe_title = title.replace(_SLASH, _SLASH_SUBSTITUTE)
    return f"{team}{SEPARATOR}{safe_title}{CACHE_SUFFIX}"


def decode_filename(filename: str, team: str | None = None) -> Optional[Tuple[str, str]]:
    """Recover ``(team, title)`` from a cache filename.

    When ``team`` is given only files prefixed with ``<team>-`` match and the
    title is the remainder; otherwise the team is everything before the first
    separator.  Returns ``None`` for names that are not cache files.
    """

    if not filename.endswith(CACHE_SUFFIX):
        return None
    stem = filename[: -len(CACHE_SUFFIX)]

    if team is not None:
        prefix = f"{team}{SEPARATOR}"
        if not stem.startswith(prefix):
            return None
        decoded_team, raw_title = team, stem[len(prefix) :]
    else:
        decoded_team, sep, raw_title = stem.partition(SEPARATOR)
        if not sep:
            return None

    if not decoded_team or not raw_title:
        return None
    return decoded_team, raw_title.replace(_SLASH_SUBSTITUTE, _SLASH)


class ArticleCache:
    """One JSON file per summarised article under a single directory."""

    def __init__(self, root: Path | str | None = None) -> None:
        self.root = resolve_cache_root(root)

    def path_for(self, team: str, title: str) -> Path:
        return self.root / encode_filename(team, title)

    def has(self, team: str, title: str) -> bool:
        return self.path_for(team, title).is_file()

    def read(self, team: str, title: str) -> CacheRecord:
        """Load the record for ``(team, title)``.

        Raises :class:`FileNotFoundError` when nothing is cached and
        :class:`CacheCorruptError` when the file is not a valid record.
        """

        return self._read_path(self.path_for(team, title))

    def _read_path(self, path: Path) -> CacheRecord:
        raw = path.read_text(encoding="utf-8")
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise CacheCorruptError(str(path), f"invalid JSON ({exc})") from exc

        try:
            return CacheRecord.model_validate(data)
        except ValidationError as exc:
            raise CacheCorruptError(str(path), str(exc)) from exc

    def write(self, team: str, title: str, record: CacheRecord) -> None:
        """Persist ``record``; filesystem failures are logged and ignored."""

        payload = record.model_dump(mode="json", exclude_none=True)
        payload.setdefault("team", team)
        payload.setdefault("title", title)
        payload.setdefault("cached_at", datetime.now(UTC).isoformat())

        path = self.path_for(team, title)
        try:
            ensure_cache_root(self.root)
            path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
        except OSError as exc:  # pragma: no cover - filesystem failures are environmental
            logger.warning("Failed to cache article %s for %s at %s: %s", title, team, path, exc)
            return

        logger.debug("Cached article %s for %s at %s", title, team, path)

    def list_all(self, team: str | None = None) -> List[Tuple[str, str, CacheRecord]]:
        """Return every cached ``(team, title, record)``, optionally for one team.

        Files are returned in name order.  Corrupt records raise
        :class:`CacheCorruptError`.
        """

        if not self.root.is_dir():
            return []

        entries: List[Tuple[str, str, CacheRecord]] = []
        for path in sorted(self.root.iterdir()):
            if not path.is_file():
                continue
            decoded = decode_filename(path.name, team)
            if decoded is None:
                continue
            entries.append((decoded[0], decoded[1], self._read_path(path)))

        return entries
