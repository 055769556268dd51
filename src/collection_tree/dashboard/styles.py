"""Dashboard Cytoscape stylesheet and HTTP method colors."""

from __future__ import annotations

from typing import Any

METHOD_COLORS: dict[str, str] = {
    "GET": "#61AFFE",
    "POST": "#49CC90",
    "PUT": "#FCA130",
    "PATCH": "#50E3C2",
    "DELETE": "#F93E3E",
}

_DEFAULT_COLOR = "#888888"


def method_color(method: str) -> str:
    """Return hex color for an HTTP method."""
    return METHOD_COLORS.get(method.upper(), _DEFAULT_COLOR)


HIERARCHY_STYLESHEET: list[dict[str, Any]] = [
    {
        "selector": "node",
        "style": {
            "label": "data(label)",
            "font-size": "10px",
            "text-valign": "center",
            "text-margin-x": "data(offset)",
            "text-opacity": "data(opacity)",
            "background-color": "data(fill)",
            "border-width": 1.5,
            "border-color": "steelblue",
            "width": "data(diameter)",
            "height": "data(diameter)",
        },
    },
    {
        "selector": ".inner",
        "style": {
            "text-halign": "left",
        },
    },
    {
        "selector": ".leaf",
        "style": {
            "text-halign": "right",
        },
    },
    {
        "selector": "node:selected",
        "style": {
            "border-width": 3,
            "border-color": "#FF5722",
        },
    },
    {
        "selector": "edge",
        "style": {
            "curve-style": "unbundled-bezier",
            "control-point-weights": "0.25 0.75",
            "control-point-distances": "data(bend)",
            "line-color": "#ccc",
            "width": 1.5,
        },
    },
]
