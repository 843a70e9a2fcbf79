"""Protocol for caches of resolved identifier strings.

Resolving an id is pure, so caching is never required for correctness. A
cache is always passed explicitly to the service that uses it; there is no
process-wide instance.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from relayid.cache.models import CacheKey


@runtime_checkable
class IdCache(Protocol):
    """Protocol for storing resolved id strings keyed by their inputs.

    Example implementations:
        - LruIdCache: bounded in-memory cache (default)
        - A shared external store for multi-process deployments

    Usage:
        cache = LruIdCache(max_entries=1024)
        key = CacheKey.of("Film", 42, IdScope.GLOBAL)

        if (value := cache.get(key)) is None:
            value = resolve_id("Film", 42)
            cache.put(key, value)

        # Caller-controlled invalidation
        cache.invalidate(key)

    Thread Safety:
        Implementations should be thread-safe for concurrent access.
    """

    def get(self, key: CacheKey) -> str | None:
        """Get a cached value.

        Returns:
            The cached id string, or None on a miss.
        """
        ...

    def put(self, key: CacheKey, value: str) -> None:
        """Store a value, possibly evicting older entries."""
        ...

    def invalidate(self, key: CacheKey) -> bool:
        """Drop a single entry.

        Returns:
            True if an entry was removed.
        """
        ...

    def clear(self) -> None:
        """Drop every entry."""
        ...

    def __len__(self) -> int:
        """Number of entries currently stored."""
        ...
