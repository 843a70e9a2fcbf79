"""Typed failures raised by the identifier codec and the services built on it.

Every error derives from GlobalIdError (a ValueError), so callers can catch the
whole family at a field boundary while still telling the kinds apart:

- InvalidTypeName: encode asked for an empty or delimiter-bearing type name.
- InvalidRawId: encode got a raw id with no UTF-8 form (lone surrogates).
- DecodeFailure: the token is not validly character-encoded at all.
- MalformedIdentifier: the token decodes, but the record inside has the wrong shape.
- UnknownNodeType: a decoded type name has no registered node type.
- UnsupportedIdFormat: no formatter is registered for a requested local id format.
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "GlobalIdError",
    "InvalidTypeName",
    "InvalidRawId",
    "MalformedIdentifier",
    "DecodeFailure",
    "UnknownNodeType",
    "UnsupportedIdFormat",
]


class GlobalIdError(ValueError):
    """Base class for identifier encode, decode, and dispatch failures."""


class InvalidTypeName(GlobalIdError):
    """Raised when a type name is empty or contains the field delimiter."""

    def __init__(self, type_name: str, reason: str) -> None:
        self.type_name = type_name
        super().__init__(f"Invalid type name {type_name!r}: {reason}")


class InvalidRawId(GlobalIdError):
    """Raised when a raw id cannot be encoded as UTF-8."""

    def __init__(self, raw_id: str, reason: str) -> None:
        self.raw_id = raw_id
        super().__init__(f"Invalid raw id {raw_id!r}: {reason}")


class MalformedIdentifier(GlobalIdError):
    """Raised when a decoded token does not hold a marker, type, and id."""

    def __init__(self, token: str, reason: str | None = None) -> None:
        self.token = token
        message = f"String Id value ({token}) is not a valid Global Id"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class DecodeFailure(GlobalIdError):
    """Raised when the character encoding layer rejects a token."""

    def __init__(self, token: str, reason: str) -> None:
        self.token = token
        super().__init__(f"Cannot decode identifier {token!r}: {reason}")


class UnknownNodeType(GlobalIdError):
    """Raised when no node type is registered under a name."""

    def __init__(self, type_name: str) -> None:
        self.type_name = type_name
        super().__init__(f"No node type registered as {type_name!r}")


class UnsupportedIdFormat(GlobalIdError):
    """Raised when a local id format has no registered formatter."""

    def __init__(self, id_format: Any) -> None:
        self.id_format = id_format
        super().__init__(f"No formatter registered for id format {id_format!r}")
