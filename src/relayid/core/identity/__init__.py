"""Identity functionality: global id codec and scope policy."""

from relayid.core.identity.models import DELIMITER, MARKER, GlobalId, IdScope
from relayid.core.identity.operations import (
    from_global_id,
    resolve_id,
    to_global_id,
    validate_type_name,
)

__all__ = [
    # Models
    "GlobalId",
    "IdScope",
    "MARKER",
    "DELIMITER",
    # Operations
    "to_global_id",
    "from_global_id",
    "resolve_id",
    "validate_type_name",
]
