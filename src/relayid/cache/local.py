"""Bounded in-memory id cache."""

from __future__ import annotations

import threading
from collections import OrderedDict

from relayid.cache.models import CacheKey


class LruIdCache:
    """Least-recently-used cache of resolved id strings.

    All operations hold a lock, so one instance can be shared by concurrent
    callers.

    Args:
        max_entries: Maximum number of entries kept before evicting the least
            recently used one.
    """

    def __init__(self, max_entries: int = 1024):
        if max_entries <= 0:
            raise ValueError(f"max_entries must be positive, got {max_entries}")
        self._max_entries = max_entries
        self._entries: OrderedDict[CacheKey, str] = OrderedDict()
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    @property
    def max_entries(self) -> int:
        return self._max_entries

    def get(self, key: CacheKey) -> str | None:
        with self._lock:
            value = self._entries.get(key)
            if value is None:
                self.misses += 1
                return None
            self._entries.move_to_end(key)
            self.hits += 1
            return value

    def put(self, key: CacheKey, value: str) -> None:
        with self._lock:
            self._entries[key] = value
            self._entries.move_to_end(key)
            while len(self._entries) > self._max_entries:
                self._entries.popitem(last=False)

    def invalidate(self, key: CacheKey) -> bool:
        with self._lock:
            return self._entries.pop(key, None) is not None

    def invalidate_type(self, type_name: str) -> int:
        """Drop every entry for a type name.

        Returns:
            Number of entries removed.
        """
        with self._lock:
            stale = [key for key in self._entries if key.type_name == type_name]
            for key in stale:
                del self._entries[key]
            return len(stale)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self.hits = 0
            self.misses = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries
