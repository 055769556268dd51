"""Expand/collapse state over a static hierarchy.

An inner node keeps its subtree in exactly one of ``visible_children``
(Expanded) or ``hidden_children`` (Collapsed). Toggling swaps the two
references and never rebuilds the subtree, so descendants keep their own
state while hidden.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from collection_tree.core.hierarchy.geometry import Point
from collection_tree.models import Node


@dataclass(eq=False)
class DisclosureNode:
    name: str
    depth: int = 0
    visible_children: list[DisclosureNode] | None = None
    hidden_children: list[DisclosureNode] | None = None
    id: int | None = None
    position: Point | None = None
    previous_position: Point | None = None

    @property
    def subtree(self) -> list[DisclosureNode] | None:
        return self.visible_children if self.visible_children is not None else self.hidden_children

    @property
    def is_leaf(self) -> bool:
        return not self.subtree

    @property
    def is_expanded(self) -> bool:
        return self.visible_children is not None

    @property
    def is_collapsed(self) -> bool:
        return self.hidden_children is not None

    def __repr__(self) -> str:
        state = "leaf" if self.is_leaf else ("expanded" if self.is_expanded else "collapsed")
        return f"DisclosureNode(id={self.id}, name={self.name!r}, {state})"


def materialize(node: Node, depth: int = 0) -> DisclosureNode:
    """Wrap ``node`` and its descendants; every inner node starts Expanded."""
    wrapped = DisclosureNode(name=node.name, depth=depth)
    if node.children:
        wrapped.visible_children = [materialize(child, depth + 1) for child in node.children]
    return wrapped


def toggle(node: DisclosureNode) -> bool:
    """Swap the visible and hidden branches. Returns False for leaves."""
    if node.is_leaf:
        return False
    node.visible_children, node.hidden_children = node.hidden_children, node.visible_children
    return True


def collapse(node: DisclosureNode) -> None:
    """Force ``node`` and everything beneath it to Collapsed."""
    children = node.subtree
    if not children:
        return
    for child in children:
        collapse(child)
    node.hidden_children = children
    node.visible_children = None


def expand_all_descendants(node: DisclosureNode) -> None:
    children = node.subtree
    if not children:
        return
    node.visible_children = children
    node.hidden_children = None
    for child in children:
        expand_all_descendants(child)


def collapse_all_children(root: DisclosureNode) -> None:
    """Expand ``root`` and collapse each of its children recursively."""
    children = root.subtree
    if not children:
        return
    root.visible_children = children
    root.hidden_children = None
    for child in children:
        collapse(child)


def iter_visible(root: DisclosureNode) -> Iterator[DisclosureNode]:
    """Yield the visible tree in depth-first pre-order."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        if node.visible_children:
            stack.extend(reversed(node.visible_children))


def iter_all(root: DisclosureNode) -> Iterator[DisclosureNode]:
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        if node.subtree:
            stack.extend(reversed(node.subtree))
