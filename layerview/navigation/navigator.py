"""Depth/parent-scoped cursor over a loaded object batch.

The navigator shows one depth level at a time. Descending into a node scopes
the next level to that node's children; levels that contain a single node are
skipped automatically. The visible list is rebuilt from the store on every
transition rather than patched in place.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass

from ..model import Batch, ObjectNode, ObjectStore, TypeRegistry
from ..summary import summarize
from .selection import SelectionList

logger = logging.getLogger(__name__)

DEFAULT_DEPTH = 1


@dataclass(frozen=True)
class Session:
    """Persisted navigation snapshot."""

    depth: int


def _repeated_types_only(nodes: list[ObjectNode]) -> list[ObjectNode]:
    counts = Counter(node.type_id for node in nodes)
    return [node for node in nodes if counts[node.type_id] > 1]


class Navigator:
    """Stateful depth/scope cursor; the only mutator of navigation state."""

    def __init__(
        self,
        batch: Batch | None = None,
        *,
        default_depth: int = DEFAULT_DEPTH,
        repeated_types_only: bool = False,
    ) -> None:
        self.types = TypeRegistry()
        self.store = ObjectStore()
        self.default_depth = default_depth
        self.repeated_types_only = repeated_types_only
        self._depth = 0
        self._selected_parents: list[str] = []
        self._list: SelectionList[ObjectNode] = SelectionList()
        if batch is None:
            self._reset(None)
        else:
            self.load(batch)

    def load(self, batch: Batch, depth: int | None = None) -> None:
        """Replace the loaded batch and reset navigation.

        ``depth`` overrides the default starting depth and is clamped to
        ``[0, max_depth]``. Malformed batches raise ``MalformedInputError``
        before anything is replaced.
        """
        types = TypeRegistry(batch.types)
        store = ObjectStore(batch.nodes, types)
        self.types = types
        self.store = store
        self._reset(depth)

    def _reset(self, depth: int | None) -> None:
        target = self.default_depth if depth is None else depth
        self._depth = max(0, min(target, self.store.max_depth))
        self._selected_parents = []
        self._recompute_visible()

    def _recompute_visible(self) -> None:
        while True:
            parent_id = self._selected_parents[-1] if self._selected_parents else None
            nodes = self.store.at_depth(self._depth, parent_id)
            if not self.repeated_types_only:
                break
            nodes = _repeated_types_only(nodes)
            if nodes or parent_id is not None or self._depth >= self.store.max_depth:
                break
            logger.debug("depth %d has no repeated types, moving deeper", self._depth)
            self._depth += 1
        self._list = SelectionList(nodes, last_selected=self._list.last_selected)

    def _has_children_below(self, node: ObjectNode) -> bool:
        return bool(self.store.at_depth(self._depth + 1, node.id))

    def descend(self) -> bool:
        """Move into the selected node's children; return whether depth changed.

        No-op without a selection, at ``max_depth``, or when the selected node
        has no children on the next level.
        """
        current = self._list.current()
        start_depth = self._depth
        while current is not None:
            if self._depth >= self.store.max_depth or not self._has_children_below(current):
                break
            self._selected_parents.append(current.id)
            self._depth += 1
            self._recompute_visible()
            if len(self._list) != 1:
                break
            self._list.select(0)
            current = self._list.current()
            logger.debug("auto-descending through single node %s", current.id)
        if self._depth != start_depth:
            logger.debug("descended from depth %d to %d", start_depth, self._depth)
        return self._depth != start_depth

    def ascend(self) -> bool:
        """Move up one level, reselecting the node that scoped the old level."""
        if self._depth <= 0:
            return False
        start_depth = self._depth
        popped = self._selected_parents.pop() if self._selected_parents else None
        self._depth -= 1
        self._recompute_visible()
        if popped is not None:
            for idx, node in enumerate(self._list.items):
                if node.id == popped:
                    self._list.select(idx)
                    break
        logger.debug("ascended from depth %d to %d", start_depth, self._depth)
        return self._depth != start_depth

    def select(self, index: int) -> bool:
        return self._list.select(index)

    def cycle_next(self) -> None:
        self._list.next()

    def cycle_previous(self) -> None:
        self._list.previous()

    def jump_start(self) -> None:
        self._list.start()

    def jump_end(self) -> None:
        self._list.end()

    def visible_nodes(self) -> list[ObjectNode]:
        return list(self._list.items)

    def selected_index(self) -> int | None:
        return self._list.selected

    def last_selection_index(self) -> int | None:
        return self._list.last_selected

    def selected_node(self) -> ObjectNode | None:
        return self._list.current()

    def current_depth(self) -> int:
        return self._depth

    def max_depth(self) -> int:
        return self.store.max_depth

    def scope(self) -> tuple[str, ...]:
        """Return the stack of ancestor ids scoping the current level."""
        return tuple(self._selected_parents)

    def summarize(self, node: ObjectNode) -> str:
        return summarize(node, self.store, self.types, 0)

    def snapshot(self) -> Session:
        return Session(depth=self._depth)
