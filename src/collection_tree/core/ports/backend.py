from collections.abc import Callable
from typing import Protocol

from collection_tree.core.hierarchy.geometry import Viewport
from collection_tree.core.hierarchy.shapes import LinkKey, LinkShape, NodeShape, NodeStyle

EXPAND_ALL = "expandAll"
COLLAPSE_ALL = "collapseAll"
RESET_VIEW = "resetView"


class DrawingBackend(Protocol):
    def create_node(self, shape: NodeShape) -> None: ...

    def remove_node(self, node_id: int, *, after: int = 0) -> None: ...

    def create_link(self, shape: LinkShape) -> None: ...

    def remove_link(self, key: LinkKey, *, after: int = 0) -> None: ...

    def animate_node(self, node_id: int, style: NodeStyle, duration: int) -> None: ...

    def animate_link(self, key: LinkKey, path: str, duration: int) -> None: ...

    def animate_viewport(self, viewport: Viewport, duration: int) -> None: ...

    def on_node_click(self, handler: Callable[[int], None]) -> None: ...

    def on_command(self, command: str, handler: Callable[[], None]) -> None: ...
