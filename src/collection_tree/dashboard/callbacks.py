"""Dash callback registrations."""

from __future__ import annotations

import logging
import threading
from typing import Any

from dash import Dash, Input, Output, ctx, no_update

from collection_tree.backends.cytoscape import CytoscapeBackend
from collection_tree.core.hierarchy.geometry import Viewport
from collection_tree.core.hierarchy.view import HierarchyView
from collection_tree.core.ports.backend import COLLAPSE_ALL, EXPAND_ALL, RESET_VIEW

_log = logging.getLogger(__name__)

_BUTTON_COMMANDS = {
    "expand-all-btn": EXPAND_ALL,
    "collapse-all-btn": COLLAPSE_ALL,
}


def handle_hierarchy_event(
    view: HierarchyView,
    backend: CytoscapeBackend,
    trigger: str | None,
    node_data: dict[str, Any] | None,
) -> tuple[Any, Any, Any, str]:
    """Apply one user event and return (elements, layout, status, error)."""
    try:
        if trigger in _BUTTON_COMMANDS:
            backend.dispatch(_BUTTON_COMMANDS[trigger])
        elif trigger == "hierarchy-graph" and node_data:
            backend.tap(node_data)
        else:
            return no_update, no_update, no_update, ""
    except (KeyError, ValueError) as exc:
        _log.exception("Hierarchy update failed")
        return no_update, no_update, no_update, f"Failed to update hierarchy: {exc}"
    frame = backend.flush()
    visible = len(view.last_pass) if view.last_pass is not None else 0
    return frame.elements, frame.layout, f"{visible} node(s) visible.", ""


def handle_viewport_change(
    view: HierarchyView,
    pan: dict[str, float] | None,
    zoom: float | None,
) -> Any:
    """Record a pan/zoom made in the browser and return it for the viewport store."""
    if pan is None or zoom is None:
        return no_update
    view.on_zoom(Viewport(x=pan["x"], y=pan["y"], k=zoom))
    return {"x": view.viewport.x, "y": view.viewport.y, "k": view.viewport.k}


def register_callbacks(app: Dash, view: HierarchyView, backend: CytoscapeBackend) -> None:
    # One view is shared by every browser session.
    lock = threading.Lock()

    # ── Hierarchy: node clicks and expand/collapse buttons ────────

    @app.callback(
        [
            Output("hierarchy-graph", "elements"),
            Output("hierarchy-graph", "layout"),
            Output("hierarchy-status", "children"),
            Output("dashboard-error", "children"),
        ],
        [
            Input("hierarchy-graph", "tapNodeData"),
            Input("expand-all-btn", "n_clicks"),
            Input("collapse-all-btn", "n_clicks"),
        ],
        prevent_initial_call=True,
    )
    def on_hierarchy_event(
        node_data: dict[str, Any] | None,
        _expand_clicks: int,
        _collapse_clicks: int,
    ) -> tuple[Any, Any, Any, str]:
        with lock:
            return handle_hierarchy_event(view, backend, ctx.triggered_id, node_data)

    # ── Hierarchy: reset pan/zoom ─────────────────────────────────

    @app.callback(
        [Output("hierarchy-graph", "pan"), Output("hierarchy-graph", "zoom")],
        Input("reset-view-btn", "n_clicks"),
        prevent_initial_call=True,
    )
    def reset_view(_: int) -> tuple[dict[str, float], float]:
        with lock:
            backend.dispatch(RESET_VIEW)
            return backend.pan(), backend.zoom()

    # ── Hierarchy: user pan/zoom ──────────────────────────────────

    @app.callback(
        Output("viewport-store", "data"),
        [Input("hierarchy-graph", "pan"), Input("hierarchy-graph", "zoom")],
        prevent_initial_call=True,
    )
    def on_viewport_change(pan: dict[str, float] | None, zoom: float | None) -> Any:
        with lock:
            return handle_viewport_change(view, pan, zoom)
