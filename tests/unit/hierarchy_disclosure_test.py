"""Tests for the expand/collapse state machine."""

from __future__ import annotations

from collection_tree.core.hierarchy.disclosure import (
    DisclosureNode,
    collapse,
    collapse_all_children,
    expand_all_descendants,
    iter_all,
    iter_visible,
    materialize,
    toggle,
)
from collection_tree.models import Node


def _state(root: DisclosureNode) -> list[tuple[str, bool, bool]]:
    return [(n.name, n.is_expanded, n.is_collapsed) for n in iter_all(root)]


def _by_name(root: DisclosureNode, name: str) -> DisclosureNode:
    return next(n for n in iter_all(root) if n.name == name)


class TestMaterialize:
    def test_wraps_every_node_expanded(self, sample_tree: Node) -> None:
        root = materialize(sample_tree)
        nodes = list(iter_all(root))
        assert len(nodes) == 16
        assert all(n.is_expanded for n in nodes if not n.is_leaf)
        assert all(n.id is None for n in nodes)

    def test_depth(self, sample_tree: Node) -> None:
        root = materialize(sample_tree)
        assert _by_name(root, "Root").depth == 0
        assert _by_name(root, "Branch 2").depth == 1
        assert _by_name(root, "Leaf 1.2.2").depth == 3

    def test_empty_children_is_leaf(self) -> None:
        node = materialize(Node(name="lonely", children=[]))
        assert node.is_leaf
        assert node.visible_children is None
        assert node.hidden_children is None


class TestToggle:
    def test_branches_are_mutually_exclusive(self, sample_tree: Node) -> None:
        root = materialize(sample_tree)
        branch = _by_name(root, "Branch 1")
        assert toggle(branch) is True
        assert branch.visible_children is None
        assert branch.hidden_children is not None
        assert toggle(branch) is True
        assert branch.hidden_children is None
        assert branch.visible_children is not None

    def test_double_toggle_restores_subtree_state(self, sample_tree: Node) -> None:
        root = materialize(sample_tree)
        branch = _by_name(root, "Branch 1")
        toggle(_by_name(root, "Leaf 1.2"))
        before = _state(root)
        subtree = branch.visible_children

        toggle(branch)
        toggle(branch)

        assert _state(root) == before
        assert branch.visible_children is subtree

    def test_hidden_subtree_keeps_its_own_state(self, sample_tree: Node) -> None:
        root = materialize(sample_tree)
        branch = _by_name(root, "Branch 3")
        inner = _by_name(root, "Leaf 3.1")
        toggle(inner)
        toggle(branch)
        toggle(branch)
        assert inner.is_collapsed

    def test_leaf_is_a_noop(self, sample_tree: Node) -> None:
        root = materialize(sample_tree)
        leaf = _by_name(root, "Leaf 2.1")
        assert toggle(leaf) is False
        assert leaf.visible_children is None
        assert leaf.hidden_children is None


class TestBulkOperations:
    def test_collapse_is_recursive(self, sample_tree: Node) -> None:
        root = materialize(sample_tree)
        branch = _by_name(root, "Branch 1")
        collapse(branch)
        assert branch.is_collapsed
        assert _by_name(root, "Leaf 1.2").is_collapsed

    def test_collapse_reaches_below_already_collapsed_nodes(self, sample_tree: Node) -> None:
        root = materialize(sample_tree)
        branch = _by_name(root, "Branch 3")
        toggle(branch)
        collapse(branch)
        assert _by_name(root, "Leaf 3.1").is_collapsed

    def test_expand_all_descendants(self, sample_tree: Node) -> None:
        root = materialize(sample_tree)
        for child in root.visible_children or ():
            collapse(child)
        expand_all_descendants(root)
        assert all(n.is_expanded for n in iter_all(root) if not n.is_leaf)
        assert len(list(iter_visible(root))) == 16

    def test_collapse_all_children(self, sample_tree: Node) -> None:
        root = materialize(sample_tree)
        collapse_all_children(root)
        visible = list(iter_visible(root))
        assert [n.name for n in visible] == ["Root", "Branch 1", "Branch 2", "Branch 3"]
        assert all(n.is_collapsed for n in visible[1:])

    def test_collapse_all_children_reexpands_collapsed_root(self, sample_tree: Node) -> None:
        root = materialize(sample_tree)
        toggle(root)
        collapse_all_children(root)
        assert root.is_expanded
        assert len(list(iter_visible(root))) == 4


def test_iter_visible_is_preorder(sample_tree: Node) -> None:
    root = materialize(sample_tree)
    collapse(_by_name(root, "Branch 3"))
    collapse(_by_name(root, "Leaf 1.2"))
    assert [n.name for n in iter_visible(root)] == [
        "Root",
        "Branch 1",
        "Leaf 1.1",
        "Leaf 1.2",
        "Leaf 1.3",
        "Branch 2",
        "Leaf 2.1",
        "Leaf 2.2",
        "Branch 3",
    ]
