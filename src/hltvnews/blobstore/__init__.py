"""Location of the directory holding cached article summaries."""

from __future__ import annotations

from pathlib import Path

#: ``articles-cached`` at the project root, next to ``src``.
DEFAULT_CACHE_ROOT = Path(__file__).resolve().parents[3] / "articles-cached"


def resolve_cache_root(cache_root: Path | str | None = None) -> Path:
    """Return ``cache_root`` as a path, or :data:`DEFAULT_CACHE_ROOT` when unset."""

    return DEFAULT_CACHE_ROOT if cache_root is None else Path(cache_root)


def ensure_cache_root(cache_root: Path | str | None = None) -> Path:
    """Create the cache directory if it is missing and return it."""

    root = resolve_cache_root(cache_root)
    root.mkdir(parents=True, exist_ok=True)
    return root


__all__ = ["DEFAULT_CACHE_ROOT", "ensure_cache_root", "resolve_cache_root"]
