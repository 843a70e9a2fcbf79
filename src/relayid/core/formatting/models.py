"""Local id format models.

Usage:
    class OrdinalFormatter:
        def __init__(self, ordinals: dict[str, int]):
            self._ordinals = ordinals

        def format(self, type_name: str, raw_id: Any) -> str:
            return str(self._ordinals[str(raw_id)])
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Protocol, runtime_checkable


class IdFormat(Enum):
    """Output format of a local id field."""

    UUID = "uuid"
    """The raw id as stored. Default."""

    ORDINAL = "ordinal"
    """Sequential number assigned by the data source."""

    HASH_ORDINAL = "hash_ordinal"
    """Hash of the ordinal."""

    HASH_64_ORDINAL = "hash_64_ordinal"
    """64-bit hash of the ordinal."""


@runtime_checkable
class IdentifierFormatter(Protocol):
    """Strategy producing the string form of a local id.

    Only the UUID format ships with a built-in strategy (RawIdFormatter).
    Ordinal and hash formats depend on the data source and are registered by
    the application.
    """

    def format(self, type_name: str, raw_id: Any) -> str:
        """Render raw_id of an entity of type type_name."""
        ...


class RawIdFormatter:
    """Formats a local id as its plain string form."""

    def format(self, type_name: str, raw_id: Any) -> str:
        return str(raw_id)
