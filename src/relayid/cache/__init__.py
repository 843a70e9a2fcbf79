"""Explicit caching of resolved identifier strings."""

from relayid.cache.local import LruIdCache
from relayid.cache.models import CacheKey
from relayid.cache.protocol import IdCache

__all__ = [
    "IdCache",
    "CacheKey",
    "LruIdCache",
]
