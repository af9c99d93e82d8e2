"""Decoding of parser batches from JSON documents.

The parsing collaborator emits ``{"types": [...], "objects": [...]}``; the
older ``complex_types``/``complex_objects`` keys are accepted too.
Shape problems raise ``MalformedInputError`` instead of being defaulted so
upstream parser defects stay visible.
"""

from __future__ import annotations

import json
import sys
from collections.abc import Mapping
from pathlib import Path

from ..errors import MalformedInputError
from .types import AttributedValue, Batch, ObjectNode, TypeDescriptor

_TYPE_KEYS = ("types", "complex_types")
_OBJECT_KEYS = ("objects", "complex_objects")
_VALUE_FLAGS = ("is_url", "is_decorative", "is_id")


def read_text(path: Path) -> str:
    """Read text using tolerant encoding fallback order."""
    for encoding in ("utf-8", "utf-8-sig", "latin-1"):
        try:
            return path.read_text(encoding=encoding)
        except UnicodeDecodeError:
            continue
    return path.read_bytes().decode("utf-8", errors="replace")


def _pick(data: Mapping[str, object], keys: tuple[str, ...]) -> object:
    for key in keys:
        if key in data:
            return data[key]
    raise MalformedInputError(f"batch is missing {keys[0]!r}")


def _identifier(value: object, what: str) -> str:
    # bool is an int subclass; a flag in an id slot is a parser bug.
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise MalformedInputError(f"{what} must be a string, got {value!r}")
    return str(value)


def _decode_type(raw: object, index: int) -> TypeDescriptor:
    if not isinstance(raw, Mapping):
        raise MalformedInputError(f"type #{index} is not an object")
    if "id" not in raw:
        raise MalformedInputError(f"type #{index} has no id")
    type_id = _identifier(raw["id"], f"type #{index} id")
    name = raw.get("name")
    if not isinstance(name, str):
        raise MalformedInputError(f"type {type_id!r} has no name")
    return TypeDescriptor(id=type_id, name=name)


def _decode_value(key: str, raw: object, node_id: str) -> AttributedValue:
    if not isinstance(raw, Mapping):
        raise MalformedInputError(f"value {key!r} of node {node_id!r} is not an object")
    flags: dict[str, bool] = {}
    for flag in _VALUE_FLAGS:
        flag_value = raw.get(flag)
        if not isinstance(flag_value, bool):
            raise MalformedInputError(f"value {key!r} of node {node_id!r} is missing flag {flag!r}")
        flags[flag] = flag_value
    text = raw.get("value")
    if not isinstance(text, str):
        raise MalformedInputError(f"value {key!r} of node {node_id!r} has no string value")
    name = raw.get("name", key)
    if not isinstance(name, str):
        raise MalformedInputError(f"value {key!r} of node {node_id!r} has a non-string name")
    return AttributedValue(name=name, value=text, **flags)


def _decode_node(raw: object, index: int) -> ObjectNode:
    if not isinstance(raw, Mapping):
        raise MalformedInputError(f"object #{index} is not an object")
    if "id" not in raw:
        raise MalformedInputError(f"object #{index} has no id")
    node_id = _identifier(raw["id"], f"object #{index} id")
    if "type_id" not in raw:
        raise MalformedInputError(f"node {node_id!r} has no type_id")
    type_id = _identifier(raw["type_id"], f"type_id of node {node_id!r}")

    raw_parent = raw.get("parent_id")
    parent_id = None if raw_parent is None else _identifier(raw_parent, f"parent_id of node {node_id!r}")

    depth = raw.get("depth")
    if isinstance(depth, bool) or not isinstance(depth, int) or depth < 0:
        raise MalformedInputError(f"node {node_id!r} has invalid depth {depth!r}")

    raw_values = raw.get("values", {})
    if not isinstance(raw_values, Mapping):
        raise MalformedInputError(f"values of node {node_id!r} must be an object")
    values = {
        str(key): _decode_value(str(key), raw_value, node_id)
        for key, raw_value in raw_values.items()
    }

    raw_children = raw.get("child_ids", [])
    if not isinstance(raw_children, list):
        raise MalformedInputError(f"child_ids of node {node_id!r} must be a list")
    child_ids = tuple(
        _identifier(child, f"child id of node {node_id!r}") for child in raw_children
    )

    return ObjectNode(
        id=node_id,
        type_id=type_id,
        parent_id=parent_id,
        depth=depth,
        values=values,
        child_ids=child_ids,
    )


def decode_batch(data: object) -> Batch:
    """Convert a decoded JSON document into a typed ``Batch``."""
    if not isinstance(data, Mapping):
        raise MalformedInputError("batch must be a JSON object")
    raw_types = _pick(data, _TYPE_KEYS)
    raw_objects = _pick(data, _OBJECT_KEYS)
    if not isinstance(raw_types, list):
        raise MalformedInputError("batch types must be a list")
    if not isinstance(raw_objects, list):
        raise MalformedInputError("batch objects must be a list")
    return Batch(
        types=tuple(_decode_type(raw, idx) for idx, raw in enumerate(raw_types)),
        nodes=tuple(_decode_node(raw, idx) for idx, raw in enumerate(raw_objects)),
    )


def parse_batch(text: str) -> Batch:
    """Parse JSON text into a ``Batch``."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise MalformedInputError(f"invalid JSON: {exc}") from exc
    return decode_batch(data)


def read_batch(path: Path | None) -> Batch:
    """Read a batch from ``path``; ``None`` or ``-`` reads stdin."""
    if path is None or str(path) == "-":
        return parse_batch(sys.stdin.read())
    return parse_batch(read_text(path))
