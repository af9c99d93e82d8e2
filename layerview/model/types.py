"""Domain datatypes for parsed object batches."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field


@dataclass(frozen=True)
class TypeDescriptor:
    """Human-readable name for one object type id."""

    id: str
    name: str


@dataclass(frozen=True)
class AttributedValue:
    """One named text value of an object, with the parser's content flags."""

    name: str
    value: str
    is_url: bool
    is_decorative: bool
    is_id: bool

    @property
    def is_content(self) -> bool:
        """Return whether the value carries readable document text."""
        return not (self.is_url or self.is_decorative or self.is_id)


@dataclass(frozen=True)
class ObjectNode:
    """Flattened tree node; parent and children are referenced by id only."""

    id: str
    type_id: str
    parent_id: str | None
    depth: int
    values: Mapping[str, AttributedValue] = field(default_factory=dict)
    child_ids: tuple[str, ...] = ()

    @property
    def is_degenerate(self) -> bool:
        """Return whether the node has neither own values nor children."""
        return not self.values and not self.child_ids


@dataclass(frozen=True)
class Batch:
    """One decoded input batch as produced by the parsing collaborator."""

    types: tuple[TypeDescriptor, ...] = ()
    nodes: tuple[ObjectNode, ...] = ()


__all__ = [
    "TypeDescriptor",
    "AttributedValue",
    "ObjectNode",
    "Batch",
]
