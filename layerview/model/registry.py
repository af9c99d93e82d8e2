"""Immutable type-id to type-name lookup for one loaded batch."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from ..errors import UnknownTypeError
from .types import TypeDescriptor


class TypeRegistry:
    """Read-only mapping of type ids to descriptors.

    Later descriptors with a duplicate id replace earlier ones, matching
    how the parser emits refined type names.
    """

    def __init__(self, types: Iterable[TypeDescriptor] = ()) -> None:
        self._types: dict[str, TypeDescriptor] = {}
        for descriptor in types:
            self._types[descriptor.id] = descriptor

    def __contains__(self, type_id: object) -> bool:
        return type_id in self._types

    def __len__(self) -> int:
        return len(self._types)

    def __iter__(self) -> Iterator[TypeDescriptor]:
        return iter(self._types.values())

    def get(self, type_id: str) -> TypeDescriptor | None:
        return self._types.get(type_id)

    def name_of(self, type_id: str) -> str:
        """Return the type name for ``type_id``; unknown ids are an input error."""
        descriptor = self._types.get(type_id)
        if descriptor is None:
            raise UnknownTypeError(type_id)
        return descriptor.name
