"""Interactive collapsible tree driven through a drawing backend."""

from __future__ import annotations

import logging

from collection_tree.core.config import ViewConfig
from collection_tree.core.hierarchy.disclosure import (
    DisclosureNode,
    collapse,
    collapse_all_children,
    expand_all_descendants,
    iter_visible,
    materialize,
    toggle,
)
from collection_tree.core.hierarchy.geometry import Point, Viewport, diagonal
from collection_tree.core.hierarchy.layout import Edge, LayoutPass, compute_layout
from collection_tree.core.hierarchy.reconcile import reconcile
from collection_tree.core.hierarchy.shapes import LinkKey, LinkShape, NodeShape, NodeStyle
from collection_tree.core.ports.backend import COLLAPSE_ALL, EXPAND_ALL, RESET_VIEW, DrawingBackend
from collection_tree.models import Node

logger = logging.getLogger(__name__)


class HierarchyView:
    """Keep disclosure state for ``tree`` and mirror it onto ``backend``.

    The root starts expanded with every child collapsed recursively, and the
    first frame is drawn on construction. Each update lays out the visible
    tree, matches shapes to the previous frame by node id and schedules
    enter/update/exit animations that start from (or end at) the node that
    triggered the change.
    """

    def __init__(
        self,
        tree: Node,
        backend: DrawingBackend,
        config: ViewConfig | None = None,
    ) -> None:
        self._config = config or ViewConfig()
        self._backend = backend
        self._id_counter = 0
        self._nodes_by_id: dict[int, DisclosureNode] = {}
        self._rendered_nodes: dict[int, DisclosureNode] = {}
        self._rendered_links: dict[LinkKey, Edge] = {}

        self.root = materialize(tree)
        self.root.previous_position = Point(0, self._config.height / 2)
        self.viewport = Viewport.initial(self._config.margin)
        self.last_pass: LayoutPass | None = None

        for child in self.root.visible_children or ():
            collapse(child)

        self.attach(backend)
        self.update(self.root)

    @property
    def config(self) -> ViewConfig:
        return self._config

    def next_id(self) -> int:
        self._id_counter += 1
        return self._id_counter

    def node(self, node_id: int) -> DisclosureNode:
        try:
            return self._nodes_by_id[node_id]
        except KeyError:
            raise KeyError(f"Unknown node id {node_id}") from None

    # ------------------------------------------------------------------
    # Host wiring
    # ------------------------------------------------------------------

    def attach(self, backend: DrawingBackend) -> None:
        backend.on_node_click(self.on_toggle)
        backend.on_command(EXPAND_ALL, self.on_expand_all)
        backend.on_command(COLLAPSE_ALL, self.on_collapse_all)
        backend.on_command(RESET_VIEW, self.on_reset_view)

    def on_toggle(self, node_id: int) -> None:
        self.toggle_by_id(node_id)

    def on_expand_all(self) -> None:
        self.expand_all()

    def on_collapse_all(self) -> None:
        self.collapse_all()

    def on_reset_view(self) -> None:
        self.reset_view()

    def on_zoom(self, viewport: Viewport) -> None:
        """Record a pan/zoom performed by the host."""
        self.viewport = viewport

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def toggle(self, node: DisclosureNode) -> LayoutPass | None:
        if not toggle(node):
            logger.debug("Ignoring toggle on leaf %r", node.name)
            return None
        logger.debug("Toggled %r (expanded=%s)", node.name, node.is_expanded)
        return self.update(node)

    def toggle_by_id(self, node_id: int) -> LayoutPass | None:
        return self.toggle(self.node(node_id))

    def expand_all(self) -> LayoutPass:
        expand_all_descendants(self.root)
        return self.update(self.root)

    def collapse_all(self) -> LayoutPass:
        collapse_all_children(self.root)
        return self.update(self.root)

    def reset_view(self) -> Viewport:
        self.viewport = Viewport.initial(self._config.margin)
        self._backend.animate_viewport(self.viewport, self._config.duration)
        return self.viewport

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def update(self, source: DisclosureNode) -> LayoutPass:
        cfg = self._config
        duration = cfg.duration
        backend = self._backend

        for node in iter_visible(self.root):
            if node.id is None:
                node.id = self.next_id()
                self._nodes_by_id[node.id] = node

        layout = compute_layout(self.root, breadth=cfg.height, depth_step=cfg.depth_step)
        destination = source.position or self.root.position
        assert destination is not None
        origin = source.previous_position or destination

        nodes = reconcile(self._rendered_nodes, layout.nodes, key=_node_key)
        for node in nodes.entered:
            backend.create_node(self._shape(node, NodeStyle(origin, 0, 0, self._fill(node))))
        for node in nodes.present:
            assert node.id is not None and node.position is not None
            backend.animate_node(node.id, NodeStyle(node.position, cfg.node_radius, 1, self._fill(node)), duration)
        for node in nodes.exited:
            assert node.id is not None
            backend.animate_node(node.id, NodeStyle(destination, 0, 0, self._fill(node)), duration)
            backend.remove_node(node.id, after=duration)

        links = reconcile(self._rendered_links, layout.edges, key=_edge_key)
        for edge in links.entered:
            backend.create_link(LinkShape(edge.key, diagonal(origin, origin)))
        for edge in links.present:
            backend.animate_link(edge.key, diagonal(edge.source, edge.target), duration)
        for edge in links.exited:
            backend.animate_link(edge.key, diagonal(destination, destination), duration)
            backend.remove_link(edge.key, after=duration)

        logger.debug(
            "Update from %r: %d entered, %d updated, %d exited",
            source.name,
            len(nodes.entered),
            len(nodes.updated),
            len(nodes.exited),
        )

        for node in layout.nodes:
            node.previous_position = node.position
        self._rendered_nodes = {_node_key(node): node for node in layout.nodes}
        self._rendered_links = {edge.key: edge for edge in layout.edges}
        self.last_pass = layout
        return layout

    def _fill(self, node: DisclosureNode) -> str:
        return self._config.collapsed_fill if node.hidden_children else self._config.expanded_fill

    def _shape(self, node: DisclosureNode, style: NodeStyle) -> NodeShape:
        assert node.id is not None
        if node.is_leaf:
            return NodeShape(node.id, node.name, "start", self._config.label_offset, style)
        return NodeShape(node.id, node.name, "end", -self._config.label_offset, style)


def _node_key(node: DisclosureNode) -> int:
    assert node.id is not None
    return node.id


def _edge_key(edge: Edge) -> LinkKey:
    return edge.key
