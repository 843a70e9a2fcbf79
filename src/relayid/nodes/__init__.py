"""Node types and the registry that produces and resolves their ids."""

from relayid.nodes.models import IdField, NodeResult, NodeType, to_camel_case
from relayid.nodes.registry import NodeRegistry

__all__ = [
    # Models
    "IdField",
    "NodeType",
    "NodeResult",
    "to_camel_case",
    # Registry
    "NodeRegistry",
]
