"""Convert collection documents into dashboard figures and summary values."""

from __future__ import annotations

from collections import Counter
from typing import Any

import plotly.graph_objects as go  # type: ignore[import-untyped]

from collection_tree.dashboard.styles import method_color
from collection_tree.models import CollectionDocument


def folder_request_counts(doc: CollectionDocument) -> list[tuple[str, int]]:
    return [(folder.name, len(folder.item)) for folder in doc.item]


def method_counts(doc: CollectionDocument) -> list[tuple[str, int]]:
    counter: Counter[str] = Counter(item.request.method for folder in doc.item for item in folder.item)
    return sorted(counter.items())


def folder_counts_to_figure(doc: CollectionDocument) -> go.Figure:
    """Return a Plotly bar chart of requests per folder, colored by method."""
    rows = folder_request_counts(doc)
    if not rows:
        fig = go.Figure()
        fig.update_layout(title="No requests", height=300)
        return fig
    colors = [method_color(folder.item[0].request.method if folder.item else "") for folder in doc.item]
    fig = go.Figure(
        go.Bar(
            x=[name for name, _ in rows],
            y=[count for _, count in rows],
            marker_color=colors,
        )
    )
    fig.update_layout(
        title="Requests per Folder",
        xaxis_title="Folder",
        yaxis_title="Requests",
        height=320,
        margin={"l": 40, "r": 20, "t": 40, "b": 40},
    )
    return fig


def request_rows(doc: CollectionDocument) -> list[dict[str, Any]]:
    """Flatten the collection into table rows."""
    return [
        {
            "folder": folder.name,
            "name": item.name,
            "method": item.request.method,
            "url": item.request.url,
            "assertions": sum(line.startswith("pm.test(") for event in item.event for line in event.script.exec),
        }
        for folder in doc.item
        for item in folder.item
    ]
