"""relayid: opaque global object identifiers for API servers.

Usage:
    from relayid import IdField, IdScope, NodeRegistry, NodeType, from_global_id, to_global_id

    token = to_global_id("Film", 42)
    type_name, raw_id = from_global_id(token)  # ("Film", "42")

    registry = NodeRegistry()
    registry.register(NodeType("Film", films.get, IdField(lambda f: f.episode_id)))
    registry.global_id_for("Film", film)                 # opaque token
    registry.global_id_for("Film", film, IdScope.LOCAL)  # "4"
    registry.resolve_node(token)                          # films.get("42")
"""

__version__ = "0.1.0"

# Cache
from relayid.cache import CacheKey, IdCache, LruIdCache

# Config
from relayid.config import GlobalIdSettings

# Core primitives
from relayid.core import (
    DELIMITER,
    MARKER,
    CharacterEncoding,
    DecodeFailure,
    FormatterRegistry,
    GlobalId,
    GlobalIdError,
    IdentifierFormatter,
    IdFormat,
    IdScope,
    InvalidRawId,
    InvalidTypeName,
    MalformedIdentifier,
    RawIdFormatter,
    UnknownNodeType,
    UnsupportedIdFormat,
    UrlSafeBase64,
    from_global_id,
    resolve_id,
    to_global_id,
)

# Node registry
from relayid.nodes import IdField, NodeRegistry, NodeResult, NodeType

__all__ = [
    # Version
    "__version__",
    # Codec
    "to_global_id",
    "from_global_id",
    "resolve_id",
    "GlobalId",
    "IdScope",
    "MARKER",
    "DELIMITER",
    "CharacterEncoding",
    "UrlSafeBase64",
    # Errors
    "GlobalIdError",
    "InvalidTypeName",
    "InvalidRawId",
    "MalformedIdentifier",
    "DecodeFailure",
    "UnknownNodeType",
    "UnsupportedIdFormat",
    # Formatting
    "IdFormat",
    "IdentifierFormatter",
    "RawIdFormatter",
    "FormatterRegistry",
    # Nodes
    "IdField",
    "NodeType",
    "NodeResult",
    "NodeRegistry",
    # Cache
    "IdCache",
    "CacheKey",
    "LruIdCache",
    # Config
    "GlobalIdSettings",
]
