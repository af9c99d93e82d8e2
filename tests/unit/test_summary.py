"""Summarizer behavior tests.

Covers value filtering, the sibling type histogram, collapsing of repeated
sibling types, the recursion cap, and tolerance of dangling/cyclic links.
"""

from __future__ import annotations

import unittest
from unittest import mock

from layerview import summary
from layerview.model import AttributedValue, ObjectNode, ObjectStore, TypeDescriptor, TypeRegistry
from layerview.summary import ELLIPSIS, summarize


def _values(text: str) -> dict[str, AttributedValue]:
    return {"text": AttributedValue("text", text, is_url=False, is_decorative=False, is_id=False)}


def _node(node_id: str, type_id: str, depth: int, text: str = "v", children: tuple[str, ...] = (), parent: str | None = None) -> ObjectNode:
    return ObjectNode(
        id=node_id,
        type_id=type_id,
        parent_id=parent,
        depth=depth,
        values=_values(text),
        child_ids=children,
    )


class SummarizeTests(unittest.TestCase):
    def setUp(self) -> None:
        self.types = TypeRegistry(
            [
                TypeDescriptor("R", "Root"),
                TypeDescriptor("X", "X"),
                TypeDescriptor("Y", "Y"),
                TypeDescriptor("Z", "Zeta"),
                TypeDescriptor("A", "Alpha"),
                TypeDescriptor("M", "Mid"),
            ]
        )

    def test_repeated_sibling_types_collapse_into_histogram(self) -> None:
        store = ObjectStore(
            [
                _node("A", "R", 0, children=("B", "C", "D")),
                _node("B", "X", 1, parent="A"),
                _node("C", "X", 1, parent="A"),
                _node("D", "Y", 1, parent="A"),
            ],
            self.types,
        )

        text = summarize(store.get("A"), store, self.types, 0)

        self.assertEqual(text, " vX x 2 Y x 1  v")
        self.assertLess(text.index("X x 2 "), text.index("Y x 1 "))

    def test_repeated_children_are_not_recursed_into(self) -> None:
        store = ObjectStore(
            [
                _node("A", "R", 0, text="root", children=("B", "C", "D")),
                _node("B", "X", 1, text="first-x", parent="A"),
                _node("C", "X", 1, text="second-x", parent="A"),
                _node("D", "Y", 1, text="only-y", parent="A"),
            ],
            self.types,
        )

        text = summarize(store.get("A"), store, self.types)

        self.assertNotIn("first-x", text)
        self.assertNotIn("second-x", text)
        self.assertTrue(text.endswith(" only-y"))

    def test_skips_url_decorative_and_id_values_and_trims_text(self) -> None:
        values = {
            "href": AttributedValue("href", "https://x", is_url=True, is_decorative=False, is_id=False),
            "icon": AttributedValue("icon", "*", is_url=False, is_decorative=True, is_id=False),
            "key": AttributedValue("key", "id-42", is_url=False, is_decorative=False, is_id=True),
            "body": AttributedValue("body", "  hello world \n", is_url=False, is_decorative=False, is_id=False),
            "tail": AttributedValue("tail", "end", is_url=False, is_decorative=False, is_id=False),
        }
        node = ObjectNode(id="n", type_id="R", parent_id=None, depth=0, values=values)
        store = ObjectStore([node], self.types)

        self.assertEqual(summarize(node, store, self.types), " hello world end")

    def test_histogram_is_sorted_by_type_name(self) -> None:
        store = ObjectStore(
            [
                _node("P", "R", 0, text="p", children=("z", "a", "m")),
                _node("z", "Z", 1, text="zz", parent="P"),
                _node("a", "A", 1, text="aa", parent="P"),
                _node("m", "M", 1, text="mm", parent="P"),
            ],
            self.types,
        )

        text = summarize(store.get("P"), store, self.types)

        self.assertIn("Alpha x 1 Mid x 1 Zeta x 1 ", text)
        # Unique children still follow in child order.
        self.assertTrue(text.endswith(" zz aa mm"))

    def test_output_is_deterministic(self) -> None:
        store = ObjectStore(
            [
                _node("P", "R", 0, children=("z", "a", "a2", "m")),
                _node("z", "Z", 1, parent="P"),
                _node("a", "A", 1, parent="P"),
                _node("a2", "A", 1, parent="P"),
                _node("m", "M", 1, parent="P", children=("q",)),
                _node("q", "X", 2, parent="m"),
            ],
            self.types,
        )
        node = store.get("P")

        self.assertEqual(summarize(node, store, self.types), summarize(node, store, self.types))

    def test_recursion_stops_after_cap_with_ellipsis(self) -> None:
        nodes = []
        for idx in range(7):
            children = (f"n{idx + 1}",) if idx < 6 else ()
            parent = f"n{idx - 1}" if idx else None
            nodes.append(_node(f"n{idx}", "X", idx, text=f"a{idx}", children=children, parent=parent))
        store = ObjectStore(nodes, self.types)

        text = summarize(store.get("n0"), store, self.types)

        self.assertTrue(text.endswith(" a4" + ELLIPSIS))
        self.assertNotIn("a5", text)
        self.assertEqual(text.count("X x 1 "), 4)

    def test_dangling_child_ids_are_skipped(self) -> None:
        store = ObjectStore(
            [_node("P", "R", 0, text="p", children=("ghost", "c")), _node("c", "X", 1, text="c", parent="P")],
            self.types,
        )

        self.assertEqual(summarize(store.get("P"), store, self.types), " pX x 1  c")

    def test_cyclic_child_links_terminate_within_depth_bound(self) -> None:
        store = ObjectStore(
            [
                _node("A", "R", 0, text="a", children=("B",)),
                _node("B", "X", 1, text="b", children=("A",), parent="A"),
            ],
            self.types,
        )
        depths: list[int] = []
        real_summarize = summary.summarize

        def recording_summarize(node, store_arg, types_arg, relative_depth=0):
            depths.append(relative_depth)
            return real_summarize(node, store_arg, types_arg, relative_depth)

        with mock.patch.object(summary, "summarize", side_effect=recording_summarize):
            text = summary.summarize(store.get("A"), store, self.types, 0)

        self.assertTrue(text.endswith(ELLIPSIS))
        self.assertEqual(depths, [0, 1, 2, 3, 4])
        self.assertLessEqual(max(depths), 4)

    def test_self_referencing_node_terminates(self) -> None:
        store = ObjectStore([_node("S", "R", 0, text="s", children=("S",))], self.types)

        text = summarize(store.get("S"), store, self.types)

        self.assertEqual(text.count(" s"), 5)
        self.assertTrue(text.endswith(ELLIPSIS))


if __name__ == "__main__":
    unittest.main()
