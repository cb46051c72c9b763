"""Local raw-page cache.

Fresh page bodies are written here so a later run can reuse them when
the publisher blocks or drops a request.
"""

from __future__ import annotations

from pathlib import Path

from core.logging_config import get_logger

_LOGGER = get_logger(__name__)


class PageCache:
    """Directory-backed key/value store for raw page bodies."""

    def __init__(self, cache_dir: Path) -> None:
        self._cache_dir = cache_dir

    def write(self, key: str, content: str) -> None:
        """Write ``content`` under ``key``, creating the directory on demand."""
        self._cache_dir.mkdir(parents=True, exist_ok=True)
        (self._cache_dir / key).write_text(content, encoding="utf-8")
        _LOGGER.debug("page_cached", key=key, size=len(content))

    def read(self, key: str) -> str | None:
        """Return cached content for ``key`` or None when absent."""
        path = self._cache_dir / key
        if not path.is_file():
            return None
        return path.read_text(encoding="utf-8")
