"""Per-session translation cache.

Maps (language, lookup key) to a resolved name or to an explicit negative
marker meaning "the backend has no translation for this key". Cleared on
each session start because the language may change between sessions.
"""

from __future__ import annotations

import logging
from typing import NamedTuple


logger = logging.getLogger(__name__)


class CacheKey(NamedTuple):
    """Composite cache key."""

    language: str
    key: str


class _NegativeEntry:
    """Marker for a cached "no translation" result."""

    _instance: _NegativeEntry | None = None

    def __new__(cls) -> _NegativeEntry:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NEGATIVE"

    def __bool__(self) -> bool:
        return False


NEGATIVE = _NegativeEntry()

CacheValue = str | _NegativeEntry


class TranslationCache:
    """Session-scoped mapping CacheKey -> resolved name or NEGATIVE.

    Not thread-safe; all access happens on the host's callback thread.

    Usage:
        cache = TranslationCache()
        cache.put("en", "location.Farm", "Farm")
        cache.get("en", "location.Farm")  # "Farm"
        cache.put("en", "location.Void", NEGATIVE)
        cache.get("en", "location.Void")  # NEGATIVE
        cache.get("fr", "location.Farm")  # None (miss)
    """

    def __init__(self) -> None:
        self._entries: dict[CacheKey, CacheValue] = {}

    def get(self, language: str, key: str) -> CacheValue | None:
        """Return the cached value, NEGATIVE, or None on a miss."""
        return self._entries.get(CacheKey(language, key))

    def put(self, language: str, key: str, value: CacheValue) -> None:
        """Store a value; an existing entry for the same key is replaced."""
        self._entries[CacheKey(language, key)] = value

    def clear(self) -> None:
        """Drop every entry (session start)."""
        if self._entries:
            logger.debug(f"Clearing translation cache ({len(self._entries)} entries)")
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, item: object) -> bool:
        return item in self._entries
