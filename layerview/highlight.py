"""Inspector text for the selected node, highlighted with Pygments.

The inspector shows every attributed value of a node, including the URL,
decorative and id values the summarizer hides, as pretty-printed JSON.
"""

from __future__ import annotations

import json
from functools import lru_cache

from pygments import highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexers import JsonLexer
from pygments.styles import get_all_styles

from .model import ObjectNode, TypeRegistry

DEFAULT_STYLE = "monokai"


def node_document(node: ObjectNode, types: TypeRegistry) -> dict[str, object]:
    """Return a JSON-ready description of ``node`` and all of its values."""
    descriptor = types.get(node.type_id)
    return {
        "id": node.id,
        "type": descriptor.name if descriptor is not None else node.type_id,
        "depth": node.depth,
        "parent_id": node.parent_id,
        "values": {
            key: {
                "value": value.value,
                "is_url": value.is_url,
                "is_decorative": value.is_decorative,
                "is_id": value.is_id,
            }
            for key, value in node.values.items()
        },
        "child_ids": list(node.child_ids),
    }


def normalize_style(style: str) -> str:
    """Return ``style`` when Pygments knows it, else the default style."""
    return style if style in _known_styles() else DEFAULT_STYLE


@lru_cache(maxsize=1)
def _known_styles() -> frozenset[str]:
    return frozenset(get_all_styles())


@lru_cache(maxsize=8)
def _formatter_for_style(style: str) -> Terminal256Formatter:
    return Terminal256Formatter(style=style)


def inspect_node(
    node: ObjectNode,
    types: TypeRegistry,
    style: str = DEFAULT_STYLE,
    no_color: bool = False,
) -> list[str]:
    """Return inspector lines for ``node``, ANSI-highlighted unless ``no_color``."""
    source = json.dumps(node_document(node, types), indent=2, ensure_ascii=False)
    if no_color:
        return source.splitlines()
    rendered = highlight(source, JsonLexer(), _formatter_for_style(normalize_style(style)))
    return rendered.rstrip("\n").splitlines()
