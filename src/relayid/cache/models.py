"""Cache key model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from relayid.core.identity import MARKER, IdScope


@dataclass(frozen=True, slots=True)
class CacheKey:
    """Inputs of a resolved id: type name, stringified raw id, scope, and marker.

    The marker is part of the key so registries with different markers can
    share one cache.
    """

    type_name: str
    raw_id: str
    scope: IdScope = IdScope.GLOBAL
    marker: str = MARKER

    @classmethod
    def of(
        cls,
        type_name: str,
        raw_id: Any,
        scope: IdScope | str | None = None,
        marker: str = MARKER,
    ) -> CacheKey:
        """Build a key, normalizing raw_id to its string form and scope to a member."""
        return cls(
            type_name=type_name,
            raw_id=str(raw_id),
            scope=IdScope.parse(scope),
            marker=marker,
        )
