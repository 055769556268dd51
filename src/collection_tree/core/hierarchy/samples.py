from pathlib import Path

from collection_tree.models import Node

SAMPLE_TREE = Node(
    name="Root",
    children=[
        Node(
            name="Branch 1",
            children=[
                Node(name="Leaf 1.1"),
                Node(name="Leaf 1.2", children=[Node(name="Leaf 1.2.1"), Node(name="Leaf 1.2.2")]),
                Node(name="Leaf 1.3"),
            ],
        ),
        Node(
            name="Branch 2",
            children=[Node(name="Leaf 2.1"), Node(name="Leaf 2.2")],
        ),
        Node(
            name="Branch 3",
            children=[
                Node(
                    name="Leaf 3.1",
                    children=[Node(name="Leaf 3.1.1"), Node(name="Leaf 3.1.2"), Node(name="Leaf 3.1.3")],
                ),
                Node(name="Leaf 3.2"),
            ],
        ),
    ],
)


def load_tree(path: str | Path | None = None) -> Node:
    """Read a ``{"name": ..., "children": [...]}`` JSON file, or return the sample tree."""
    if path is None:
        return SAMPLE_TREE
    return Node.model_validate_json(Path(path).read_text(encoding="utf-8"))


def count_nodes(node: Node) -> int:
    return 1 + sum(count_nodes(child) for child in node.children or ())
