"""Core functionalities: stateless codec primitives.

Architecture Note:
    core/ contains pure, stateless functionality with no I/O and no shared
    mutable state; every function here is safe to call concurrently.
    For stateful services, see nodes/ and cache/.
"""

from relayid.core.encoding import DEFAULT_ENCODING, CharacterEncoding, UrlSafeBase64
from relayid.core.errors import (
    DecodeFailure,
    GlobalIdError,
    InvalidRawId,
    InvalidTypeName,
    MalformedIdentifier,
    UnknownNodeType,
    UnsupportedIdFormat,
)
from relayid.core.formatting import (
    FormatterRegistry,
    IdentifierFormatter,
    IdFormat,
    RawIdFormatter,
)
from relayid.core.identity import (
    DELIMITER,
    MARKER,
    GlobalId,
    IdScope,
    from_global_id,
    resolve_id,
    to_global_id,
    validate_type_name,
)

__all__ = [
    # Errors
    "GlobalIdError",
    "InvalidTypeName",
    "InvalidRawId",
    "MalformedIdentifier",
    "DecodeFailure",
    "UnknownNodeType",
    "UnsupportedIdFormat",
    # Encoding
    "CharacterEncoding",
    "UrlSafeBase64",
    "DEFAULT_ENCODING",
    # Identity
    "GlobalId",
    "IdScope",
    "MARKER",
    "DELIMITER",
    "to_global_id",
    "from_global_id",
    "resolve_id",
    "validate_type_name",
    # Formatting
    "IdFormat",
    "IdentifierFormatter",
    "RawIdFormatter",
    "FormatterRegistry",
]
