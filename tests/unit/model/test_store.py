"""Object store loading tests.

Covers degenerate-node filtering, max-depth derivation, dangling child ids,
and rejection of nodes whose type id the registry does not know.
"""

from __future__ import annotations

import unittest

from layerview.errors import MalformedInputError, UnknownTypeError
from layerview.model import AttributedValue, ObjectNode, ObjectStore, TypeDescriptor, TypeRegistry


def _text(value: str) -> dict[str, AttributedValue]:
    return {"text": AttributedValue("text", value, is_url=False, is_decorative=False, is_id=False)}


def _node(node_id: str, depth: int, parent: str | None = None, children: tuple[str, ...] = (), text: str | None = "x") -> ObjectNode:
    return ObjectNode(
        id=node_id,
        type_id="t",
        parent_id=parent,
        depth=depth,
        values=_text(text) if text is not None else {},
        child_ids=children,
    )


TYPES = TypeRegistry([TypeDescriptor("t", "Thing")])


class ObjectStoreLoadTests(unittest.TestCase):
    def test_empty_input_yields_empty_store_with_zero_depth(self) -> None:
        store = ObjectStore([], TYPES)

        self.assertEqual(len(store), 0)
        self.assertEqual(store.max_depth, 0)

    def test_degenerate_nodes_are_dropped(self) -> None:
        nodes = [
            _node("a", 0, children=("b",), text=None),
            _node("b", 1, parent="a"),
            _node("empty", 1, parent="a", text=None),
        ]

        store = ObjectStore(nodes, TYPES)

        self.assertEqual([node.id for node in store], ["a", "b"])
        self.assertEqual(store.dropped_count, 1)
        for node in store:
            self.assertFalse(not node.values and not node.child_ids)

    def test_node_with_only_dangling_children_is_retained(self) -> None:
        store = ObjectStore([_node("a", 0, children=("ghost",), text=None)], TYPES)

        self.assertIn("a", store)
        self.assertEqual(store.children_of(store.get("a")), [])

    def test_max_depth_tracks_deepest_retained_node(self) -> None:
        nodes = [
            _node("a", 0, children=("b",)),
            _node("b", 1, parent="a", children=("c",)),
            _node("c", 2, parent="b"),
            _node("deep-but-empty", 9, parent="c", text=None),
        ]

        store = ObjectStore(nodes, TYPES)

        self.assertEqual(store.max_depth, 2)

    def test_children_resolve_in_order_and_skip_missing_ids(self) -> None:
        nodes = [
            _node("a", 0, children=("c", "missing", "b")),
            _node("b", 1, parent="a"),
            _node("c", 1, parent="a"),
        ]

        store = ObjectStore(nodes, TYPES)

        self.assertEqual([child.id for child in store.children_of(store.get("a"))], ["c", "b"])
        self.assertIsNone(store.get("missing"))
        self.assertIsNone(store.get(None))

    def test_parent_links_satisfy_depth_invariant(self) -> None:
        nodes = [
            _node("a", 0, children=("b", "c")),
            _node("b", 1, parent="a", children=("d",)),
            _node("c", 1, parent="a"),
            _node("d", 2, parent="b"),
            _node("orphan", 3, parent="nowhere"),
        ]

        store = ObjectStore(nodes, TYPES)

        for node in store:
            parent = store.parent_of(node)
            if parent is not None:
                self.assertEqual(node.depth, parent.depth + 1)

    def test_at_depth_filters_by_parent_and_keeps_store_order(self) -> None:
        nodes = [
            _node("a", 0, children=("b", "c")),
            _node("x", 0, children=("y",)),
            _node("b", 1, parent="a"),
            _node("y", 1, parent="x"),
            _node("c", 1, parent="a"),
        ]

        store = ObjectStore(nodes, TYPES)

        self.assertEqual([node.id for node in store.at_depth(1)], ["b", "y", "c"])
        self.assertEqual([node.id for node in store.at_depth(1, "a")], ["b", "c"])

    def test_unknown_type_rejects_load_and_keeps_previous_contents(self) -> None:
        store = ObjectStore([_node("a", 0)], TYPES)
        bad = ObjectNode(id="b", type_id="nope", parent_id=None, depth=3, values=_text("y"))

        with self.assertRaises(UnknownTypeError) as ctx:
            store.load([bad], TYPES)

        self.assertIsInstance(ctx.exception, MalformedInputError)
        self.assertEqual(ctx.exception.node_id, "b")
        self.assertEqual([node.id for node in store], ["a"])
        self.assertEqual(store.max_depth, 0)

    def test_unknown_type_on_degenerate_node_is_ignored(self) -> None:
        empty = ObjectNode(id="e", type_id="nope", parent_id=None, depth=0)

        store = ObjectStore([empty, _node("a", 0)], TYPES)

        self.assertEqual([node.id for node in store], ["a"])

    def test_duplicate_ids_reject_load_and_keep_previous_contents(self) -> None:
        store = ObjectStore([_node("a", 0)], TYPES)

        with self.assertRaises(MalformedInputError):
            store.load([_node("b", 0), _node("c", 1, parent="b"), _node("b", 1, text="again")], TYPES)

        self.assertEqual([node.id for node in store], ["a"])

    def test_duplicate_id_on_degenerate_node_is_ignored(self) -> None:
        store = ObjectStore([_node("a", 0), _node("a", 1, text=None)], TYPES)

        self.assertEqual([node.depth for node in store], [0])


class TypeRegistryTests(unittest.TestCase):
    def test_name_of_returns_descriptor_name(self) -> None:
        registry = TypeRegistry([TypeDescriptor("1", "Item"), TypeDescriptor("2", "Title")])

        self.assertEqual(registry.name_of("2"), "Title")
        self.assertEqual(len(registry), 2)
        self.assertIn("1", registry)

    def test_name_of_unknown_id_raises(self) -> None:
        with self.assertRaises(UnknownTypeError):
            TypeRegistry().name_of("missing")


if __name__ == "__main__":
    unittest.main()
