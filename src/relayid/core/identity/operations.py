"""Global id codec and scope policy.

Usage:
    token = to_global_id("Film", 42)  # "dDpGaWxtOjQy"
    from_global_id(token)  # GlobalId(type_name="Film", id="42")

    resolve_id("Film", 42)  # same as to_global_id
    resolve_id("Film", 42, IdScope.LOCAL)  # "42"
"""

from __future__ import annotations

from typing import Any

from relayid.core.encoding import DEFAULT_ENCODING, CharacterEncoding
from relayid.core.errors import (
    DecodeFailure,
    InvalidRawId,
    InvalidTypeName,
    MalformedIdentifier,
)
from relayid.core.identity.models import DELIMITER, MARKER, GlobalId, IdScope


def validate_type_name(type_name: str) -> str:
    """Check that a type name can be embedded in a global id record.

    Args:
        type_name: Candidate entity type name.

    Returns:
        The type name unchanged.

    Raises:
        InvalidTypeName: If type_name is not a string, is empty, or contains
            the field delimiter, or has no UTF-8 form.
    """
    if not isinstance(type_name, str):
        raise InvalidTypeName(type_name, f"expected str, got {type(type_name).__name__}")
    if not type_name:
        raise InvalidTypeName(type_name, "must not be empty")
    if DELIMITER in type_name:
        raise InvalidTypeName(type_name, f"must not contain {DELIMITER!r}")
    try:
        type_name.encode("utf-8")
    except UnicodeEncodeError as e:
        raise InvalidTypeName(type_name, "not encodable as UTF-8") from e
    return type_name


def to_global_id(
    type_name: str,
    raw_id: Any,
    *,
    marker: str = MARKER,
    encoding: CharacterEncoding = DEFAULT_ENCODING,
) -> str:
    """Encode a type name and local key into an opaque global id.

    The record "<marker>:<type_name>:<raw_id>" is UTF-8 encoded and passed
    through the character encoding. raw_id is stringified with str() and may
    contain the delimiter.

    Args:
        type_name: Entity type name, non-empty and delimiter-free.
        raw_id: Local key of the entity.
        marker: Record tag. Validated like a type name.
        encoding: Character encoding applied to the record bytes.

    Returns:
        Opaque URL-safe token.

    Raises:
        InvalidTypeName: If type_name or marker is empty, contains the
            delimiter, or has no UTF-8 form.
        InvalidRawId: If str(raw_id) has no UTF-8 form.
    """
    validate_type_name(type_name)
    validate_type_name(marker)
    raw = str(raw_id)
    try:
        raw_bytes = raw.encode("utf-8")
    except UnicodeEncodeError as e:
        raise InvalidRawId(raw, "not encodable as UTF-8") from e
    prefix = f"{marker}{DELIMITER}{type_name}{DELIMITER}".encode("utf-8")
    return encoding.encode(prefix + raw_bytes)


def from_global_id(
    token: str,
    *,
    expected_marker: str | None = None,
    encoding: CharacterEncoding = DEFAULT_ENCODING,
) -> GlobalId:
    """Decode a global id produced by to_global_id.

    Only the first two delimiters separate fields; anything after the second
    belongs to the raw id, so composite ids survive unchanged.

    Args:
        token: Opaque token received from a client.
        expected_marker: If given, the record marker must equal it.
        encoding: Character encoding the token was produced with.

    Returns:
        The decoded type name and raw id.

    Raises:
        DecodeFailure: If the token is not validly encoded or not UTF-8.
        MalformedIdentifier: If the record has fewer than three fields or an
            unexpected marker.
    """
    if not isinstance(token, str):
        raise DecodeFailure(repr(token), f"expected str, got {type(token).__name__}")

    data = encoding.decode(token)
    try:
        record = data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodeFailure(token, "record is not valid UTF-8") from e

    parts = record.split(DELIMITER, 2)
    if len(parts) != 3:
        raise MalformedIdentifier(token)

    marker, type_name, raw_id = parts
    if expected_marker is not None and marker != expected_marker:
        raise MalformedIdentifier(token, f"unexpected marker {marker!r}")
    return GlobalId(type_name=type_name, id=raw_id)


def resolve_id(
    type_name: str,
    raw_id: Any,
    scope: IdScope | str | None = IdScope.GLOBAL,
    *,
    marker: str = MARKER,
    encoding: CharacterEncoding = DEFAULT_ENCODING,
) -> str:
    """Produce the client-facing id for an entity in the requested scope.

    Args:
        type_name: Entity type name.
        raw_id: Local key of the entity.
        scope: GLOBAL (default, also for None) wraps into a token; LOCAL
            returns str(raw_id) untouched.
        marker: Record tag for the GLOBAL path.
        encoding: Character encoding for the GLOBAL path.

    Returns:
        Global token or stringified raw id.

    Raises:
        InvalidTypeName: GLOBAL scope with an invalid type name.
        InvalidRawId: GLOBAL scope with a raw id that has no UTF-8 form.
        ValueError: If scope names no known scope.
    """
    if IdScope.parse(scope) is IdScope.LOCAL:
        return str(raw_id)
    return to_global_id(type_name, raw_id, marker=marker, encoding=encoding)
