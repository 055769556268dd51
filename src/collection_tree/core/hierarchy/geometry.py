"""Screen-space primitives shared by the layout, the view and the backends.

``x`` is the along-axis (depth, left to right) and ``y`` the cross-axis
(sibling breadth, top to bottom).
"""

from __future__ import annotations

from dataclasses import dataclass

from collection_tree.core.config import Margin


@dataclass(frozen=True)
class Point:
    x: float
    y: float


def diagonal(source: Point, target: Point) -> str:
    """Return the SVG path of a horizontal S-curve from ``source`` to ``target``."""
    mid = (source.x + target.x) / 2
    return f"M {source.x} {source.y} C {mid} {source.y}, {mid} {target.y}, {target.x} {target.y}"


@dataclass(frozen=True)
class Viewport:
    """Pan/zoom transform: screen = point * k + (x, y)."""

    x: float = 0
    y: float = 0
    k: float = 1

    @classmethod
    def initial(cls, margin: Margin) -> Viewport:
        return cls(x=margin.left, y=margin.top, k=1)
