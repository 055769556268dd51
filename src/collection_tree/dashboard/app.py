"""Dash application factory."""

from __future__ import annotations

from dash import Dash

from collection_tree.backends.cytoscape import CytoscapeBackend
from collection_tree.core.collection import build
from collection_tree.core.config import CollectionConfig, ViewConfig
from collection_tree.core.hierarchy.geometry import Viewport
from collection_tree.core.hierarchy.samples import SAMPLE_TREE
from collection_tree.core.hierarchy.view import HierarchyView
from collection_tree.dashboard.callbacks import register_callbacks
from collection_tree.dashboard.layout import build_layout
from collection_tree.models import Node


def create_dashboard(
    tree: Node | None = None,
    config: CollectionConfig | None = None,
    profile: str | None = None,
    view_config: ViewConfig | None = None,
) -> Dash:
    config = config or CollectionConfig.from_env()
    view_config = view_config or ViewConfig()
    selected_profile = profile or config.profile
    doc = build(config, selected_profile)

    backend = CytoscapeBackend(Viewport.initial(view_config.margin))
    view = HierarchyView(tree or SAMPLE_TREE, backend, view_config)

    app = Dash(__name__, suppress_callback_exceptions=True)
    app.layout = build_layout(backend.flush(), doc, selected_profile, backend.pan(), backend.zoom())
    register_callbacks(app, view, backend)
    return app
