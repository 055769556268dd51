from collection_tree.backends.cytoscape import CytoscapeBackend, Frame
from collection_tree.backends.memory import RecordedLink, RecordedNode, RecordingBackend

__all__ = [
    "CytoscapeBackend",
    "Frame",
    "RecordedLink",
    "RecordedNode",
    "RecordingBackend",
]
