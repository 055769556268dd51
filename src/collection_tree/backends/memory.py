from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from collection_tree.core.hierarchy.geometry import Viewport
from collection_tree.core.hierarchy.shapes import LinkKey, LinkShape, NodeShape, NodeStyle


@dataclass
class RecordedNode:
    shape: NodeShape
    style: NodeStyle
    target: NodeStyle
    duration: int = 0
    remove_after: int | None = None


@dataclass
class RecordedLink:
    key: LinkKey
    path: str
    target: str
    duration: int = 0
    remove_after: int | None = None


@dataclass
class RecordingBackend:
    """In-memory drawing backend.

    Keeps the start and target state of every shape and a log of every call.
    Nothing moves until ``finish_animations`` settles all targets and drops
    shapes whose removal was scheduled.
    """

    nodes: dict[int, RecordedNode] = field(default_factory=dict)
    links: dict[LinkKey, RecordedLink] = field(default_factory=dict)
    viewport: Viewport = field(default_factory=Viewport)
    operations: list[tuple[Any, ...]] = field(default_factory=list)
    _click_handler: Callable[[int], None] | None = None
    _commands: dict[str, Callable[[], None]] = field(default_factory=dict)

    def create_node(self, shape: NodeShape) -> None:
        self.operations.append(("create_node", shape.node_id))
        self.nodes[shape.node_id] = RecordedNode(shape=shape, style=shape.style, target=shape.style)

    def remove_node(self, node_id: int, *, after: int = 0) -> None:
        self.operations.append(("remove_node", node_id, after))
        if after <= 0:
            self.nodes.pop(node_id, None)
        elif node_id in self.nodes:
            self.nodes[node_id].remove_after = after

    def create_link(self, shape: LinkShape) -> None:
        self.operations.append(("create_link", shape.key))
        self.links[shape.key] = RecordedLink(key=shape.key, path=shape.path, target=shape.path)

    def remove_link(self, key: LinkKey, *, after: int = 0) -> None:
        self.operations.append(("remove_link", key, after))
        if after <= 0:
            self.links.pop(key, None)
        elif key in self.links:
            self.links[key].remove_after = after

    def animate_node(self, node_id: int, style: NodeStyle, duration: int) -> None:
        self.operations.append(("animate_node", node_id, duration))
        record = self.nodes[node_id]
        # An in-flight animation is superseded from its last target.
        record.style = record.target
        record.target = style
        record.duration = duration

    def animate_link(self, key: LinkKey, path: str, duration: int) -> None:
        self.operations.append(("animate_link", key, duration))
        record = self.links[key]
        record.path = record.target
        record.target = path
        record.duration = duration

    def animate_viewport(self, viewport: Viewport, duration: int) -> None:
        self.operations.append(("animate_viewport", viewport, duration))
        self.viewport = viewport

    def on_node_click(self, handler: Callable[[int], None]) -> None:
        self._click_handler = handler

    def on_command(self, command: str, handler: Callable[[], None]) -> None:
        self._commands[command] = handler

    # -- simulated input -------------------------------------------------

    def click(self, node_id: int) -> None:
        if self._click_handler is None:
            raise RuntimeError("No node click handler registered")
        self._click_handler(node_id)

    def press(self, command: str) -> None:
        try:
            handler = self._commands[command]
        except KeyError:
            raise KeyError(f"No handler registered for command '{command}'") from None
        handler()

    def finish_animations(self) -> None:
        self.nodes = {k: r for k, r in self.nodes.items() if r.remove_after is None}
        self.links = {k: r for k, r in self.links.items() if r.remove_after is None}
        for node in self.nodes.values():
            node.style = node.target
            node.duration = 0
        for link in self.links.values():
            link.path = link.target
            link.duration = 0

    def operation_names(self) -> list[str]:
        return [op[0] for op in self.operations]
