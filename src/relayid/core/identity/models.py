"""Identifier models.

Usage:
    gid = GlobalId(type_name="Film", id="42")
    scope = IdScope.parse("local")  # IdScope.LOCAL
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

MARKER = "t"
"""Literal tag leading every global id record, reserved for format versioning."""

DELIMITER = ":"
"""Field separator inside the plaintext record."""


class IdScope(Enum):
    """Whether an identifier is self-describing or relative to caller context."""

    GLOBAL = "global"
    """Opaque token wrapping type name and raw id. Default."""

    LOCAL = "local"
    """Bare raw id, meaningful only where the type is already known."""

    @classmethod
    def parse(cls, value: IdScope | str | None) -> IdScope:
        """Coerce a client argument or config value into a scope.

        Args:
            value: Scope member, case-insensitive name or value, or None.

        Returns:
            Matching scope; GLOBAL when value is None.

        Raises:
            ValueError: If value names no scope.
        """
        if value is None:
            return cls.GLOBAL
        if isinstance(value, cls):
            return value
        try:
            return cls(value.strip().lower())
        except (AttributeError, ValueError):
            raise ValueError(f"Unknown id scope: {value!r}") from None


@dataclass(frozen=True, slots=True)
class GlobalId:
    """Decoded global id: the entity type name and its local key."""

    type_name: str
    id: str

    def __iter__(self):
        # Allows `type_name, raw_id = from_global_id(token)`
        yield self.type_name
        yield self.id
