"""Node type descriptors and resolution results.

Usage:
    film = NodeType(
        name="Film",
        get_by_id=films.get,
        id_field=IdField(extract=lambda f: f.episode_id, local_name="id"),
    )
    film.local_field_name  # "filmId"
"""

from __future__ import annotations

import re
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from relayid.core.identity import validate_type_name

_WORD_BREAK = re.compile(r"[\s_\-]+")


def to_camel_case(text: str) -> str:
    """Convert "Film Id", "film_id", or "FilmId" to "filmId"."""
    words = [w for w in _WORD_BREAK.split(text) if w]
    if not words:
        return ""
    head, *tail = words
    return head[0].lower() + head[1:] + "".join(w[0].upper() + w[1:] for w in tail)


@dataclass(frozen=True, slots=True)
class IdField:
    """Explicit configuration of a node's id field.

    Attributes:
        extract: Returns the raw id of a source object.
        local_name: Name of the companion field exposing the local id, or None
            for no companion field. "id" is namespaced to "<typeName>Id".
        description: Human readable field description.
    """

    extract: Callable[[Any], Any]
    local_name: str | None = None
    description: str | None = None


@dataclass(frozen=True, slots=True)
class NodeType:
    """A resolvable entity kind: its name, fetch routine, and id field.

    get_by_id receives the decoded raw id string and may return the entity
    directly or an awaitable resolving to it.
    """

    name: str
    get_by_id: Callable[[str], Any | Awaitable[Any]]
    id_field: IdField
    description: str | None = None

    def __post_init__(self) -> None:
        validate_type_name(self.name)

    @property
    def local_field_name(self) -> str | None:
        """Name of the local id field, namespaced when it would clash with "id"."""
        name = self.id_field.local_name
        if not name or not name.strip():
            return None
        if name.strip().lower() == "id":
            return to_camel_case(self.name + "Id")
        return name

    def describe_id_field(self) -> str:
        return self.id_field.description or (
            f"The Id of the {self.name}, either in GLOBAL scope (the default) or as LOCAL scope."
        )


@dataclass(frozen=True, slots=True)
class NodeResult:
    """Outcome of resolving one token in a batch.

    Exactly one of value/error is meaningful: error is None on success.
    """

    token: str
    value: Any = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
