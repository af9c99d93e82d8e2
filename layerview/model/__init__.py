"""Object batch model: typed nodes, the type registry, and the node store."""

from .batch import decode_batch, parse_batch, read_batch
from .registry import TypeRegistry
from .store import ObjectStore
from .types import AttributedValue, Batch, ObjectNode, TypeDescriptor

__all__ = [
    "AttributedValue",
    "Batch",
    "ObjectNode",
    "ObjectStore",
    "TypeDescriptor",
    "TypeRegistry",
    "decode_batch",
    "parse_batch",
    "read_batch",
]
