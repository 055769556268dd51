"""Dash layout definition with Hierarchy and Collection tabs."""

from __future__ import annotations

from typing import Any

import dash_cytoscape as cyto  # type: ignore[import-untyped]
from dash import dash_table, dcc, html

from collection_tree.backends.cytoscape import Frame
from collection_tree.core.collection import count_requests, serialize
from collection_tree.dashboard.graph_data import folder_counts_to_figure, method_counts, request_rows
from collection_tree.dashboard.styles import HIERARCHY_STYLESHEET, method_color
from collection_tree.models import CollectionDocument


def _stat_card(title: str, value: str) -> html.Div:
    return html.Div(
        [
            html.H4(title, style={"margin": "0", "color": "#666", "fontSize": "12px"}),
            html.Div(value, style={"fontSize": "24px", "fontWeight": "bold"}),
        ],
        style={
            "padding": "12px 20px",
            "border": "1px solid #ddd",
            "borderRadius": "8px",
            "minWidth": "120px",
            "textAlign": "center",
        },
    )


def _build_hierarchy_tab(frame: Frame, pan: dict[str, float], zoom: float) -> html.Div:
    button_style: dict[str, Any] = {"padding": "6px 12px"}
    return html.Div(
        [
            html.Div(
                [
                    html.Button("Expand All", id="expand-all-btn", n_clicks=0, style=button_style),
                    html.Button("Collapse All", id="collapse-all-btn", n_clicks=0, style=button_style),
                    html.Button("Reset View", id="reset-view-btn", n_clicks=0, style=button_style),
                ],
                style={"display": "flex", "gap": "10px", "margin": "12px 0"},
            ),
            html.Div(
                id="hierarchy-status",
                children="Click a node to expand or collapse it.",
                style={"marginBottom": "10px", "color": "#555", "fontSize": "13px"},
            ),
            cyto.Cytoscape(
                id="hierarchy-graph",
                elements=frame.elements,
                layout=frame.layout,
                pan=pan,
                zoom=zoom,
                userZoomingEnabled=True,
                userPanningEnabled=True,
                autoungrabify=True,
                style={"width": "100%", "height": "600px", "border": "1px solid #ddd", "borderRadius": "8px"},
                stylesheet=HIERARCHY_STYLESHEET,
            ),
        ]
    )


def _build_collection_tab(doc: CollectionDocument, profile: str) -> html.Div:
    badges = [
        html.Span(
            f"{method}: {count}",
            style={
                "padding": "2px 8px",
                "borderRadius": "12px",
                "backgroundColor": method_color(method),
                "color": "#fff",
                "fontSize": "11px",
            },
        )
        for method, count in method_counts(doc)
    ]
    rows = request_rows(doc)
    return html.Div(
        [
            html.Div(
                [
                    _stat_card("Requests", str(count_requests(doc))),
                    _stat_card("Folders", str(len(doc.item))),
                    _stat_card("Profile", profile),
                    html.Div(badges, style={"display": "flex", "gap": "6px", "flexWrap": "wrap"}),
                ],
                style={
                    "display": "flex",
                    "gap": "16px",
                    "alignItems": "center",
                    "margin": "12px 0 20px",
                    "flexWrap": "wrap",
                },
            ),
            html.H3(doc.info.name, style={"marginBottom": "8px"}),
            dcc.Graph(id="folder-chart", figure=folder_counts_to_figure(doc)),
            dash_table.DataTable(  # type: ignore[attr-defined]
                id="request-table",
                columns=[{"name": key, "id": key} for key in ("folder", "name", "method", "url", "assertions")],
                data=rows,
                style_table={"overflowX": "auto"},
                style_cell={"textAlign": "left", "padding": "4px 8px", "fontSize": "12px"},
                page_size=20,
            ),
            html.Details(
                [
                    html.Summary("Collection JSON", style={"cursor": "pointer", "fontWeight": "bold"}),
                    html.Pre(serialize(doc).decode("utf-8"), style={"fontSize": "11px", "maxHeight": "400px"}),
                ],
                style={"marginTop": "16px"},
            ),
        ]
    )


def build_layout(
    frame: Frame,
    doc: CollectionDocument,
    profile: str,
    pan: dict[str, float],
    zoom: float,
) -> html.Div:
    """Return the top-level Dash layout with tabs.

    Both tabs are rendered in the initial DOM so all component IDs exist from
    page load and callbacks can fire immediately.
    """
    return html.Div(
        [
            html.H1("Collection Tree Dashboard"),
            html.P(
                "Explore the hierarchy diagram and the generated API collection.",
                style={"color": "#666", "marginTop": "-10px", "marginBottom": "20px"},
            ),
            html.Div(id="dashboard-error", style={"color": "red"}),
            dcc.Store(id="viewport-store", data={"x": pan["x"], "y": pan["y"], "k": zoom}),
            dcc.Tabs(
                id="main-tabs",
                value="hierarchy",
                children=[
                    dcc.Tab(label="Hierarchy", value="hierarchy", children=[_build_hierarchy_tab(frame, pan, zoom)]),
                    dcc.Tab(label="Collection", value="collection", children=[_build_collection_tab(doc, profile)]),
                ],
            ),
        ],
        style={"padding": "20px", "fontFamily": "system-ui, sans-serif"},
    )
