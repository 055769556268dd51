"""Tests for the tidy tree layout."""

from __future__ import annotations

from collections import defaultdict

import pytest

from collection_tree.core.hierarchy.disclosure import DisclosureNode, collapse, iter_visible, materialize
from collection_tree.core.hierarchy.layout import LayoutPass, compute_layout
from collection_tree.models import Node

BREADTH = 560
STEP = 180


def _prepare(tree: Node) -> DisclosureNode:
    root = materialize(tree)
    for i, node in enumerate(iter_visible(root), start=1):
        node.id = i
    return root


def _layout(root: DisclosureNode) -> LayoutPass:
    return compute_layout(root, breadth=BREADTH, depth_step=STEP)


def test_single_node_is_centered() -> None:
    root = _prepare(Node(name="alone"))
    layout = _layout(root)
    assert layout.names() == ["alone"]
    assert layout.edges == []
    assert root.position is not None
    assert root.position.x == 0
    assert root.position.y == pytest.approx(BREADTH / 2)


def test_root_with_three_leaves() -> None:
    root = _prepare(Node(name="r", children=[Node(name="a"), Node(name="b"), Node(name="c")]))
    layout = _layout(root)
    ys = [n.position.y for n in layout.nodes if n.position is not None]
    assert ys == pytest.approx([BREADTH / 2, BREADTH / 6, BREADTH / 2, 5 * BREADTH / 6])
    assert [n.position.x for n in layout.nodes if n.position is not None] == [0, STEP, STEP, STEP]


def test_along_axis_depends_only_on_depth(sample_tree: Node) -> None:
    root = _prepare(sample_tree)
    layout = _layout(root)
    for node in layout.nodes:
        assert node.position is not None
        assert node.position.x == node.depth * STEP


def test_same_depth_nodes_do_not_overlap(sample_tree: Node) -> None:
    root = _prepare(sample_tree)
    layout = _layout(root)
    columns: dict[int, list[float]] = defaultdict(list)
    for node in layout.nodes:
        assert node.position is not None
        columns[node.depth].append(node.position.y)
    for ys in columns.values():
        assert all(a < b for a, b in zip(ys, ys[1:], strict=False))


def test_parents_centered_over_children(sample_tree: Node) -> None:
    root = _prepare(sample_tree)
    _layout(root)
    for node in iter_visible(root):
        if node.visible_children:
            first = node.visible_children[0].position
            last = node.visible_children[-1].position
            assert node.position is not None and first is not None and last is not None
            assert node.position.y == pytest.approx((first.y + last.y) / 2)


def test_positions_fit_breadth(sample_tree: Node) -> None:
    root = _prepare(sample_tree)
    layout = _layout(root)
    ys = [n.position.y for n in layout.nodes if n.position is not None]
    assert min(ys) > 0
    assert max(ys) < BREADTH


def test_cousins_are_spaced_wider_than_siblings() -> None:
    tree = Node(
        name="r",
        children=[
            Node(name="a", children=[Node(name="a1"), Node(name="a2")]),
            Node(name="b", children=[Node(name="b1"), Node(name="b2")]),
        ],
    )
    root = _prepare(tree)
    layout = _layout(root)
    y = {n.name: n.position.y for n in layout.nodes if n.position is not None}
    sibling_gap = y["a2"] - y["a1"]
    cousin_gap = y["b1"] - y["a2"]
    assert cousin_gap == pytest.approx(2 * sibling_gap)


def test_collapsed_subtrees_are_skipped(sample_tree: Node) -> None:
    root = _prepare(sample_tree)
    for child in root.visible_children or ():
        collapse(child)
    layout = _layout(root)
    assert layout.names() == ["Root", "Branch 1", "Branch 2", "Branch 3"]
    assert [edge.key for edge in layout.edges] == [(1, 2), (1, 8), (1, 11)]


def test_edges_carry_endpoint_positions(sample_tree: Node) -> None:
    root = _prepare(sample_tree)
    layout = _layout(root)
    by_id = {n.id: n for n in layout.nodes}
    assert len(layout.edges) == len(layout.nodes) - 1
    for edge in layout.edges:
        assert edge.source == by_id[edge.parent_id].position
        assert edge.target == by_id[edge.child_id].position
