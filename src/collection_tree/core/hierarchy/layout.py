"""Tidy tree layout (Reingold-Tilford, in Buchheim et al.'s linear-time form).

Only the cross-axis comes from the tidy layout. The along-axis is flattened to
``depth * depth_step`` so every node at a given depth shares one column.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from collection_tree.core.hierarchy.disclosure import DisclosureNode, iter_visible
from collection_tree.core.hierarchy.geometry import Point


@dataclass(frozen=True)
class Edge:
    parent_id: int
    child_id: int
    source: Point
    target: Point

    @property
    def key(self) -> tuple[int, int]:
        return (self.parent_id, self.child_id)


@dataclass(frozen=True)
class LayoutPass:
    nodes: list[DisclosureNode]
    edges: list[Edge]

    def __len__(self) -> int:
        return len(self.nodes)

    def names(self) -> list[str]:
        return [node.name for node in self.nodes]


class _Slot:
    """Scratch state of one node during a layout run."""

    __slots__ = (
        "ancestor",
        "change",
        "children",
        "index",
        "mod",
        "node",
        "parent",
        "prelim",
        "shift",
        "thread",
        "x",
        "ancestor_hint",
    )

    def __init__(self, node: DisclosureNode | None, index: int) -> None:
        self.node = node
        self.index = index
        self.parent: _Slot | None = None
        self.children: list[_Slot] | None = None
        self.ancestor_hint: _Slot | None = None
        self.ancestor: _Slot = self
        self.prelim = 0.0
        self.mod = 0.0
        self.change = 0.0
        self.shift = 0.0
        self.thread: _Slot | None = None
        self.x = 0.0


def _separation(a: _Slot, b: _Slot) -> float:
    return 1 if a.parent is b.parent else 2


def _next_left(v: _Slot) -> _Slot | None:
    return v.children[0] if v.children else v.thread


def _next_right(v: _Slot) -> _Slot | None:
    return v.children[-1] if v.children else v.thread


def _move_subtree(wm: _Slot, wp: _Slot, shift: float) -> None:
    change = shift / (wp.index - wm.index)
    wp.change -= change
    wp.shift += shift
    wm.change += change
    wp.prelim += shift
    wp.mod += shift


def _execute_shifts(v: _Slot) -> None:
    assert v.children is not None
    shift = 0.0
    change = 0.0
    for w in reversed(v.children):
        w.prelim += shift
        w.mod += shift
        change += w.change
        shift += w.shift + change


def _next_ancestor(vim: _Slot, v: _Slot, ancestor: _Slot) -> _Slot:
    return vim.ancestor if vim.ancestor.parent is v.parent else ancestor


def _apportion(v: _Slot, w: _Slot | None, ancestor: _Slot) -> _Slot:
    if w is None:
        return ancestor
    assert v.parent is not None and v.parent.children is not None
    # Inner contours (vim, vip) and outer contours (vom, vop) of the two forests.
    vop = v
    vom = v.parent.children[0]
    sip = sop = v.mod
    sim = w.mod
    som = vom.mod

    vim = _next_right(w)
    vip = _next_left(v)
    while vim is not None and vip is not None:
        outer_left = _next_left(vom)
        outer_right = _next_right(vop)
        assert outer_left is not None and outer_right is not None
        vom, vop = outer_left, outer_right
        vop.ancestor = v
        shift = vim.prelim + sim - vip.prelim - sip + _separation(vim, vip)
        if shift > 0:
            _move_subtree(_next_ancestor(vim, v, ancestor), v, shift)
            sip += shift
            sop += shift
        sim += vim.mod
        sip += vip.mod
        som += vom.mod
        sop += vop.mod
        vim = _next_right(vim)
        vip = _next_left(vip)

    if vim is not None and _next_right(vop) is None:
        vop.thread = vim
        vop.mod += sim - sop
    if vip is not None and _next_left(vom) is None:
        vom.thread = vip
        vom.mod += sip - som
        ancestor = v
    return ancestor


def _first_walk(v: _Slot) -> None:
    assert v.parent is not None and v.parent.children is not None
    siblings = v.parent.children
    w = siblings[v.index - 1] if v.index else None
    if v.children:
        _execute_shifts(v)
        midpoint = (v.children[0].prelim + v.children[-1].prelim) / 2
        if w is not None:
            v.prelim = w.prelim + _separation(v, w)
            v.mod = v.prelim - midpoint
        else:
            v.prelim = midpoint
    elif w is not None:
        v.prelim = w.prelim + _separation(v, w)
    v.parent.ancestor_hint = _apportion(v, w, v.parent.ancestor_hint or siblings[0])


def _second_walk(v: _Slot) -> None:
    assert v.parent is not None
    v.x = v.prelim + v.parent.mod
    v.mod += v.parent.mod


def _build_slots(root: DisclosureNode) -> _Slot:
    top = _Slot(root, 0)
    stack = [top]
    while stack:
        slot = stack.pop()
        assert slot.node is not None
        children = slot.node.visible_children
        if children:
            slot.children = [_Slot(child, i) for i, child in enumerate(children)]
            for child in slot.children:
                child.parent = slot
            stack.extend(slot.children)
    sentinel = _Slot(None, 0)
    sentinel.children = [top]
    top.parent = sentinel
    return top


def _pre_order(top: _Slot) -> Iterator[_Slot]:
    stack = [top]
    while stack:
        slot = stack.pop()
        yield slot
        if slot.children:
            stack.extend(reversed(slot.children))


def _post_order(top: _Slot) -> Iterator[_Slot]:
    # Children left to right, each before its parent.
    stack: list[tuple[_Slot, bool]] = [(top, False)]
    while stack:
        slot, expanded = stack.pop()
        if expanded or not slot.children:
            yield slot
            continue
        stack.append((slot, True))
        stack.extend((child, False) for child in reversed(slot.children))


def compute_layout(root: DisclosureNode, *, breadth: float, depth_step: float) -> LayoutPass:
    """Position every visible node under ``root``.

    The cross-axis is scaled into ``[0, breadth]``; node ids must already be
    assigned.
    """
    top = _build_slots(root)
    for slot in _post_order(top):
        _first_walk(slot)
    assert top.parent is not None
    top.parent.mod = -top.prelim
    for slot in _pre_order(top):
        _second_walk(slot)

    slots = list(_pre_order(top))
    left = min(slots, key=lambda s: s.x)
    right = max(slots, key=lambda s: s.x)
    s = 1 if left is right else _separation(left, right) / 2
    tx = s - left.x
    kx = breadth / (right.x + s + tx)

    for slot in slots:
        assert slot.node is not None
        slot.node.position = Point((slot.node.depth - root.depth) * depth_step, (slot.x + tx) * kx)

    nodes = list(iter_visible(root))
    edges: list[Edge] = []
    for node in nodes:
        for child in node.visible_children or ():
            assert node.id is not None and child.id is not None
            assert node.position is not None and child.position is not None
            edges.append(Edge(node.id, child.id, node.position, child.position))
    return LayoutPass(nodes=nodes, edges=edges)
