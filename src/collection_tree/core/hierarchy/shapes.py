from dataclasses import dataclass
from typing import Literal

from collection_tree.core.hierarchy.geometry import Point

LinkKey = tuple[int, int]


@dataclass(frozen=True)
class NodeStyle:
    position: Point
    radius: float
    label_opacity: float
    fill: str


@dataclass(frozen=True)
class NodeShape:
    node_id: int
    label: str
    label_anchor: Literal["start", "end"]
    label_offset: float
    style: NodeStyle


@dataclass(frozen=True)
class LinkShape:
    key: LinkKey
    path: str
