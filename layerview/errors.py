"""Exception types raised while loading and summarizing object batches."""

from __future__ import annotations


class LayerviewError(Exception):
    """Base class for layerview failures surfaced to callers."""


class MalformedInputError(LayerviewError):
    """Input batch violates the shape the parsing collaborator promises.

    Raised before any store state is replaced, so the previously loaded
    batch stays in effect.
    """


class UnknownTypeError(MalformedInputError):
    """A node references a type id the registry does not know."""

    def __init__(self, type_id: str, node_id: str | None = None) -> None:
        self.type_id = type_id
        self.node_id = node_id
        if node_id is None:
            message = f"unknown type id {type_id!r}"
        else:
            message = f"node {node_id!r} references unknown type id {type_id!r}"
        super().__init__(message)


__all__ = [
    "LayerviewError",
    "MalformedInputError",
    "UnknownTypeError",
]
