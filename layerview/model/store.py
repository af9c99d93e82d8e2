"""Flattened object arena with id lookups and derived depth bounds.

Nodes keep the order the parser emitted them in; parent/child relations are
plain id references so dangling ids simply resolve to nothing.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from ..errors import MalformedInputError, UnknownTypeError
from .registry import TypeRegistry
from .types import ObjectNode

logger = logging.getLogger(__name__)


class ObjectStore:
    """Read-only node collection, replaced wholesale by ``load``."""

    def __init__(self, nodes: Iterable[ObjectNode] = (), types: TypeRegistry | None = None) -> None:
        self._nodes: dict[str, ObjectNode] = {}
        self._max_depth = 0
        self.dropped_count = 0
        self.load(nodes, types)

    def load(self, nodes: Iterable[ObjectNode], types: TypeRegistry | None = None) -> None:
        """Replace store contents with the non-degenerate ``nodes``.

        When ``types`` is given every retained node must reference a known
        type id; otherwise ``UnknownTypeError`` is raised and the current
        contents are left untouched. Two retained nodes sharing an id raise
        ``MalformedInputError`` the same way.
        """
        retained: dict[str, ObjectNode] = {}
        dropped = 0
        for node in nodes:
            # The parser emits empty placeholder objects; they carry nothing to show.
            if node.is_degenerate:
                dropped += 1
                continue
            if types is not None and node.type_id not in types:
                raise UnknownTypeError(node.type_id, node.id)
            if node.id in retained:
                raise MalformedInputError(f"duplicate node id {node.id!r}")
            retained[node.id] = node

        self._nodes = retained
        self._max_depth = max((node.depth for node in retained.values()), default=0)
        self.dropped_count = dropped
        logger.info(
            "loaded %d nodes (%d degenerate dropped), max depth %d",
            len(retained),
            dropped,
            self._max_depth,
        )

    @property
    def max_depth(self) -> int:
        return self._max_depth

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[ObjectNode]:
        return iter(self._nodes.values())

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def get(self, node_id: str | None) -> ObjectNode | None:
        """Return node for ``node_id`` or ``None`` for absent/dangling ids."""
        if node_id is None:
            return None
        return self._nodes.get(node_id)

    def children_of(self, node: ObjectNode) -> list[ObjectNode]:
        """Resolve ``node.child_ids`` in order, skipping ids with no node."""
        children: list[ObjectNode] = []
        for child_id in node.child_ids:
            child = self._nodes.get(child_id)
            if child is not None:
                children.append(child)
        return children

    def parent_of(self, node: ObjectNode) -> ObjectNode | None:
        return self.get(node.parent_id)

    def at_depth(self, depth: int, parent_id: str | None = None) -> list[ObjectNode]:
        """Return nodes at ``depth`` in store order, optionally scoped to a parent."""
        return [
            node
            for node in self._nodes.values()
            if node.depth == depth and (parent_id is None or node.parent_id == parent_id)
        ]
