"""Drawing backend that renders the hierarchy as Dash Cytoscape elements."""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from collection_tree.core.hierarchy.geometry import Point, Viewport
from collection_tree.core.hierarchy.shapes import LinkKey, LinkShape, NodeShape, NodeStyle


@dataclass
class _NodeRecord:
    shape: NodeShape
    start: NodeStyle
    target: NodeStyle
    removing: bool = False


@dataclass
class _LinkRecord:
    key: LinkKey
    removing: bool = False


@dataclass(frozen=True)
class Frame:
    elements: list[dict[str, Any]]
    layout: dict[str, Any]


def _position(point: Point) -> dict[str, float]:
    return {"x": point.x, "y": point.y}


def link_element_id(key: LinkKey) -> str:
    return f"{key[0]}-{key[1]}"


def control_point_distances(source: Point, target: Point) -> list[float]:
    """Perpendicular offsets of the two S-curve control points.

    Matches ``diagonal``: the curve leaves ``source`` and enters ``target``
    horizontally. Offsets are measured along the left normal of the
    source-to-target line, as Cytoscape's ``unbundled-bezier`` expects.
    """
    dx = target.x - source.x
    dy = target.y - source.y
    length = math.hypot(dx, dy)
    if length == 0:
        return [0.0, 0.0]
    bend = dx * dy / (2 * length)
    return [-bend, bend]


class CytoscapeBackend:
    """Collect shape changes and emit them as Cytoscape frames.

    Cytoscape animates positions itself: each frame places nodes at their
    start position and passes the targets through a ``preset`` layout.
    Radius and opacity jump to their targets, and shapes scheduled for
    removal are dropped from the next frame.
    """

    def __init__(self, viewport: Viewport | None = None) -> None:
        self._nodes: dict[int, _NodeRecord] = {}
        self._links: dict[LinkKey, _LinkRecord] = {}
        self._duration = 0
        self._click_handler: Callable[[int], None] | None = None
        self._commands: dict[str, Callable[[], None]] = {}
        self.viewport = viewport or Viewport()

    # -- DrawingBackend --------------------------------------------------

    def create_node(self, shape: NodeShape) -> None:
        self._nodes[shape.node_id] = _NodeRecord(shape=shape, start=shape.style, target=shape.style)

    def remove_node(self, node_id: int, *, after: int = 0) -> None:
        if node_id in self._nodes:
            self._nodes[node_id].removing = True

    def create_link(self, shape: LinkShape) -> None:
        self._links[shape.key] = _LinkRecord(key=shape.key)

    def remove_link(self, key: LinkKey, *, after: int = 0) -> None:
        if key in self._links:
            self._links[key].removing = True

    def animate_node(self, node_id: int, style: NodeStyle, duration: int) -> None:
        self._nodes[node_id].target = style
        self._duration = max(self._duration, duration)

    def animate_link(self, key: LinkKey, path: str, duration: int) -> None:
        # The connector is drawn from the endpoint positions, not from ``path``.
        if key not in self._links:
            raise KeyError(f"Unknown link {key!r}")
        self._duration = max(self._duration, duration)

    def animate_viewport(self, viewport: Viewport, duration: int) -> None:
        self.viewport = viewport

    def on_node_click(self, handler: Callable[[int], None]) -> None:
        self._click_handler = handler

    def on_command(self, command: str, handler: Callable[[], None]) -> None:
        self._commands[command] = handler

    # -- host side -------------------------------------------------------

    def tap(self, node_data: dict[str, Any]) -> None:
        """Forward a Cytoscape ``tapNodeData`` payload to the click handler."""
        if self._click_handler is None:
            raise RuntimeError("No node click handler registered")
        self._click_handler(int(node_data["id"]))

    def dispatch(self, command: str) -> None:
        try:
            handler = self._commands[command]
        except KeyError:
            raise KeyError(f"No handler registered for command '{command}'") from None
        handler()

    def pan(self) -> dict[str, float]:
        return {"x": self.viewport.x, "y": self.viewport.y}

    def zoom(self) -> float:
        return self.viewport.k

    def flush(self) -> Frame:
        """Return the pending frame and settle every shape at its target."""
        self._nodes = {k: r for k, r in self._nodes.items() if not r.removing}
        self._links = {k: r for k, r in self._links.items() if not r.removing}

        elements: list[dict[str, Any]] = []
        positions: dict[str, dict[str, float]] = {}
        for node_id, record in self._nodes.items():
            target = record.target
            elements.append(
                {
                    "data": {
                        "id": str(node_id),
                        "label": record.shape.label,
                        "fill": target.fill,
                        "diameter": target.radius * 2,
                        "opacity": target.label_opacity,
                        "anchor": record.shape.label_anchor,
                        "offset": record.shape.label_offset,
                    },
                    "position": _position(record.start.position),
                    "classes": "inner" if record.shape.label_anchor == "end" else "leaf",
                }
            )
            positions[str(node_id)] = _position(target.position)
            record.start = target

        for key in self._links:
            parent_id, child_id = key
            if parent_id not in self._nodes or child_id not in self._nodes:
                continue
            elements.append(
                {
                    "data": {
                        "id": link_element_id(key),
                        "source": str(parent_id),
                        "target": str(child_id),
                        "bend": control_point_distances(
                            self._nodes[parent_id].target.position, self._nodes[child_id].target.position
                        ),
                    }
                }
            )

        layout = {
            "name": "preset",
            "positions": positions,
            "animate": self._duration > 0,
            "animationDuration": self._duration,
            "fit": False,
        }
        self._duration = 0
        return Frame(elements=elements, layout=layout)
