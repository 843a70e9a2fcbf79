"""Node registry: the resolver-side collaborator of the global id codec.

Usage:
    registry = NodeRegistry()
    registry.register(NodeType("Film", films.get, IdField(lambda f: f.episode_id)))

    # Producing ids for a field
    token = registry.global_id_for("Film", film)            # GLOBAL by default
    local = registry.global_id_for("Film", film, "local")   # bare raw id

    # Resolving ids supplied by a client
    film = registry.resolve_node(token)
    results = registry.resolve_nodes([token, "garbage"])   # per-token errors
"""

from __future__ import annotations

import asyncio
import inspect
import logging
import warnings
from collections.abc import Iterable
from typing import Any

from relayid.cache import CacheKey, IdCache, LruIdCache
from relayid.config import GlobalIdSettings
from relayid.core.errors import GlobalIdError, UnknownNodeType
from relayid.core.formatting import FormatterRegistry, IdFormat
from relayid.core.identity import GlobalId, IdScope, from_global_id, resolve_id
from relayid.nodes.models import NodeResult, NodeType
from relayid.nodes.sync_runner import SyncRunner

logger = logging.getLogger(__name__)


class NodeRegistry:
    """Explicit mapping table from type names to node types.

    Encodes ids for entities through each node's configured IdField and
    dispatches decoded tokens to the matching fetch routine.

    Args:
        settings: Marker, default scope and marker verification. Loaded from
            the environment when omitted.
        cache: Optional cache for produced id strings.
        formatters: Local id formatters. Defaults to UUID only.
    """

    def __init__(
        self,
        settings: GlobalIdSettings | None = None,
        cache: IdCache | None = None,
        formatters: FormatterRegistry | None = None,
    ):
        self._settings = settings if settings is not None else GlobalIdSettings()
        self._cache = cache
        self._formatters = formatters if formatters is not None else FormatterRegistry()
        self._nodes: dict[str, NodeType] = {}

    @classmethod
    def from_settings(
        cls, settings: GlobalIdSettings | None = None, with_cache: bool = True
    ) -> NodeRegistry:
        """Build a registry, with an LRU cache sized by settings when requested."""
        settings = settings if settings is not None else GlobalIdSettings()
        cache = LruIdCache(settings.cache_max_entries) if with_cache else None
        return cls(settings=settings, cache=cache)

    @property
    def settings(self) -> GlobalIdSettings:
        return self._settings

    @property
    def cache(self) -> IdCache | None:
        return self._cache

    @property
    def formatters(self) -> FormatterRegistry:
        return self._formatters

    # --- Registration ---

    def register(self, node_type: NodeType) -> NodeType:
        """Add a node type, replacing any node type of the same name.

        Returns:
            The registered node type.
        """
        if node_type.name in self._nodes:
            warnings.warn(
                f"Node type {node_type.name!r} is already registered and will be replaced",
                RuntimeWarning,
                stacklevel=2,
            )
        self._nodes[node_type.name] = node_type
        logger.debug("Registered node type %s", node_type.name)
        return node_type

    def get(self, type_name: str) -> NodeType:
        """Get a registered node type.

        Raises:
            UnknownNodeType: If nothing is registered under type_name.
        """
        try:
            return self._nodes[type_name]
        except KeyError:
            raise UnknownNodeType(type_name) from None

    def node_types(self) -> list[NodeType]:
        """Registered node types in registration order."""
        return list(self._nodes.values())

    def __contains__(self, type_name: object) -> bool:
        return type_name in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    # --- Producing ids ---

    def global_id_for(
        self, type_name: str, source: Any, scope: IdScope | str | None = None
    ) -> str:
        """Resolve the id field of source for a client.

        Args:
            type_name: Registered node type of source.
            source: Entity object handed to the node's IdField extractor.
            scope: Requested scope; None uses settings.default_scope.

        Returns:
            Global token (GLOBAL) or stringified raw id (LOCAL).

        Raises:
            UnknownNodeType: If type_name is not registered.
            ValueError: If scope names no known scope.
        """
        node = self.get(type_name)
        raw_id = node.id_field.extract(source)
        return self.id_for(node.name, raw_id, scope)

    def id_for(self, type_name: str, raw_id: Any, scope: IdScope | str | None = None) -> str:
        """Apply the scope policy to a raw id, going through the cache if any."""
        resolved_scope = self._settings.default_scope if scope is None else IdScope.parse(scope)

        if self._cache is None:
            return resolve_id(type_name, raw_id, resolved_scope, marker=self._settings.marker)

        key = CacheKey.of(type_name, raw_id, resolved_scope, self._settings.marker)
        value = self._cache.get(key)
        if value is None:
            value = resolve_id(type_name, raw_id, resolved_scope, marker=self._settings.marker)
            self._cache.put(key, value)
        return value

    def local_id_for(
        self, type_name: str, source: Any, id_format: IdFormat | None = None
    ) -> str:
        """Resolve the local id field of source in the requested format.

        Raises:
            UnknownNodeType: If type_name is not registered.
            UnsupportedIdFormat: If no formatter handles id_format.
        """
        node = self.get(type_name)
        raw_id = node.id_field.extract(source)
        return self._formatters.format(node.name, raw_id, id_format or IdFormat.UUID)

    def local_field_name(self, type_name: str) -> str | None:
        """Name of the local id field of a node type, if it has one."""
        return self.get(type_name).local_field_name

    # --- Resolving ids ---

    def decode(self, token: str) -> GlobalId:
        """Decode a client token with the configured marker policy.

        Raises:
            DecodeFailure: If the token is not validly encoded.
            MalformedIdentifier: If the record inside is malformed.
        """
        return from_global_id(token, expected_marker=self._settings.expected_marker)

    def _lookup(self, token: str) -> tuple[NodeType, str]:
        gid = self.decode(token)
        return self.get(gid.type_name), gid.id

    def resolve_node(self, token: str) -> Any:
        """Fetch the entity a token refers to.

        Sync fetch routines are called directly. Awaitable results of async
        fetch routines run on a background loop (SyncRunner), so this is safe
        to call from sync code on a thread that is already running an event loop.

        Raises:
            GlobalIdError: If the token cannot be decoded or names an unknown type.
        """
        node, raw_id = self._lookup(token)
        value = node.get_by_id(raw_id)
        if inspect.isawaitable(value):
            return SyncRunner.get().run(value)
        return value

    async def resolve_node_async(self, token: str) -> Any:
        """Fetch the entity a token refers to, awaiting async fetch routines.

        Raises:
            GlobalIdError: If the token cannot be decoded or names an unknown type.
        """
        node, raw_id = self._lookup(token)
        value = node.get_by_id(raw_id)
        if inspect.isawaitable(value):
            value = await value
        return value

    def resolve_nodes(self, tokens: Iterable[str]) -> list[NodeResult]:
        """Resolve several tokens in order, isolating identifier errors per token.

        Codec and registry failures become NodeResult.error; exceptions raised
        by fetch routines propagate. Like resolve_node, callable from sync code
        inside a running event loop; prefer resolve_nodes_async from coroutines.
        """
        results: list[NodeResult] = []
        for token in tokens:
            try:
                value = self.resolve_node(token)
            except GlobalIdError as e:
                results.append(_failed(token, e))
            else:
                results.append(NodeResult(token=token, value=value))
        return results

    async def resolve_nodes_async(self, tokens: Iterable[str]) -> list[NodeResult]:
        """Async form of resolve_nodes. Lookups run concurrently, order is kept."""

        async def resolve_one(token: str) -> NodeResult:
            try:
                value = await self.resolve_node_async(token)
            except GlobalIdError as e:
                return _failed(token, e)
            return NodeResult(token=token, value=value)

        return list(await asyncio.gather(*(resolve_one(t) for t in tokens)))


def _failed(token: str, error: GlobalIdError) -> NodeResult:
    logger.debug("Failed to resolve node %r: %s", token, error)
    return NodeResult(token=token, error=error)
