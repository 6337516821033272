"""Tests for breadth-first hint target search."""

from __future__ import annotations

import unittest

from hop_fakes import FakeTree, branch, leaf, sample_tree
from lazyhop.hints.search import Registry, Viewport, search


class CandidateSearchTests(unittest.TestCase):
    def test_targets_follow_breadth_first_discovery(self) -> None:
        tree, nodes = sample_tree()
        registry = search(tree, tree.root(), Viewport(0, 1000))
        self.assertEqual(registry.nodes, [nodes["delta"], nodes["alpha"], nodes["beta"]])

    def test_nodes_without_field_are_not_targets(self) -> None:
        tree, nodes = sample_tree()
        registry = search(tree, tree.root(), Viewport(0, 1000))
        self.assertNotIn(nodes["gamma"], registry.nodes)

    def test_field_requirement_can_be_relaxed(self) -> None:
        tree, nodes = sample_tree()
        registry = search(tree, tree.root(), Viewport(0, 1000), require_field=False)
        self.assertEqual(registry.nodes[-1], nodes["gamma"])

    def test_targets_lie_strictly_inside_viewport(self) -> None:
        tree, nodes = sample_tree()
        registry = search(tree, tree.root(), Viewport(10, 55))
        # alpha starts at 10 and delta ends at 55: both touch the edges.
        self.assertEqual(registry.nodes, [nodes["beta"]])
        for node in registry:
            self.assertGreater(node.start, 10)
            self.assertLess(node.end, 55)

    def test_parents_straddling_viewport_are_walked_through(self) -> None:
        tree, nodes = sample_tree()
        registry = search(tree, tree.root(), Viewport(16, 45))
        self.assertEqual(registry.nodes, [nodes["beta"]])

    def test_targets_never_have_named_children(self) -> None:
        tree, _ = sample_tree()
        registry = search(tree, tree.root(), Viewport(0, 1000))
        for node in registry:
            self.assertEqual(tree.children(node, named_only=True), [])

    def test_anonymous_children_do_not_make_transit_nodes(self) -> None:
        paren = leaf("(", 31, 32, None, named=False)
        name = branch("identifier", 30, 35, [paren], "name")
        root = branch("module", 0, 100, [name])
        registry = search(FakeTree(root), root, Viewport(0, 100))
        self.assertEqual(registry.nodes, [name])

    def test_focus_limits_search_to_its_subtree(self) -> None:
        tree, nodes = sample_tree()
        registry = search(tree, nodes["call"], Viewport(0, 1000))
        self.assertEqual(registry.nodes, [nodes["beta"]])

    def test_depth_limit_bounds_levels(self) -> None:
        tree, nodes = sample_tree()
        self.assertEqual(search(tree, tree.root(), Viewport(0, 1000), depth_limit=1).nodes, [nodes["delta"]])
        self.assertEqual(
            search(tree, tree.root(), Viewport(0, 1000), depth_limit=3).nodes,
            [nodes["delta"], nodes["alpha"]],
        )

    def test_overflow_truncates_to_first_targets(self) -> None:
        leaves = [leaf("identifier", 10 + pos * 2, 11 + pos * 2) for pos in range(12)]
        root = branch("module", 0, 100, leaves)
        registry = search(FakeTree(root), root, Viewport(0, 100), max_hints=5)
        self.assertEqual(registry.nodes, leaves[:5])
        self.assertTrue(registry.truncated)

    def test_empty_viewport_yields_empty_registry(self) -> None:
        tree, _ = sample_tree()
        registry = search(tree, tree.root(), Viewport(200, 300))
        self.assertEqual(len(registry), 0)
        self.assertFalse(registry.truncated)


class RegistryTests(unittest.TestCase):
    def test_indices_are_dense_from_zero(self) -> None:
        registry = Registry(capacity=3)
        for name in ("a", "b", "c"):
            self.assertTrue(registry.add(name))
        self.assertEqual(list(registry.items()), [(0, "a"), (1, "b"), (2, "c")])
        self.assertIsNone(registry.get(3))
        self.assertIsNone(registry.get(-1))

    def test_add_past_capacity_is_refused(self) -> None:
        registry = Registry(capacity=1)
        registry.add("a")
        self.assertFalse(registry.add("b"))
        self.assertTrue(registry.truncated)
        self.assertEqual(len(registry), 1)


if __name__ == "__main__":
    unittest.main()
