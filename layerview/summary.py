"""Bounded recursive text summaries of object subtrees.

A summary is the node's own readable values followed by a type histogram of
its children and the summaries of children whose type is unique among their
siblings. Repeated sibling types are represented only by the histogram count,
and recursion stops after a fixed number of levels, so output stays bounded
even for cyclic or very deep batches.
"""

from __future__ import annotations

from collections import Counter

from .model import ObjectNode, ObjectStore, TypeRegistry

MAX_RELATIVE_DEPTH = 3
ELLIPSIS = " ..."


def own_text(node: ObjectNode) -> str:
    """Join the node's content values, each preceded by one space."""
    parts: list[str] = []
    for value in node.values.values():
        if not value.is_content:
            continue
        parts.append(" " + value.value.strip())
    return "".join(parts)


def type_histogram(children: list[ObjectNode], types: TypeRegistry) -> list[tuple[str, int]]:
    """Count ``children`` by type name, sorted by name."""
    counts = Counter(types.name_of(child.type_id) for child in children)
    return sorted(counts.items())


def summarize(
    node: ObjectNode,
    store: ObjectStore,
    types: TypeRegistry,
    relative_depth: int = 0,
) -> str:
    """Return the bounded plain-text summary of ``node``.

    ``relative_depth`` counts levels below the item being displayed; callers
    start at ``0``. The top-level call also counts and collapses repeated
    children, not only the nested ones.
    """
    result = own_text(node)
    if relative_depth > MAX_RELATIVE_DEPTH:
        return result + ELLIPSIS

    children = store.children_of(node)
    for type_name, count in type_histogram(children, types):
        result += f"{type_name} x {count} "

    sibling_types = Counter(child.type_id for child in children)
    for child in children:
        if sibling_types[child.type_id] > 1:
            continue
        result += summarize(child, store, types, relative_depth + 1)
    return result
