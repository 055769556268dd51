from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.text import Text
from rich.tree import Tree

from collection_tree.backends.memory import RecordingBackend
from collection_tree.core.hierarchy.disclosure import DisclosureNode, iter_visible
from collection_tree.core.hierarchy.samples import load_tree
from collection_tree.core.hierarchy.view import HierarchyView

tree_app = typer.Typer(help="Inspect the collapsible hierarchy.")
console = Console()


def _label(node: DisclosureNode) -> Text:
    marker = "[+]" if node.is_collapsed else ("[-]" if node.is_expanded else "   ")
    assert node.position is not None
    return Text(f"{marker} {node.name}  #{node.id} ({node.position.x:.0f}, {node.position.y:.1f})")


def _render(node: DisclosureNode, branch: Tree) -> None:
    for child in node.visible_children or ():
        _render(child, branch.add(_label(child)))


def _find(view: HierarchyView, name: str) -> DisclosureNode:
    for node in iter_visible(view.root):
        if node.name == name:
            return node
    raise ValueError(f"No visible node named '{name}'")


@tree_app.command("show")
def show(
    data: Annotated[Path | None, typer.Option(help="JSON file with {name, children} nodes.")] = None,
    expand_all: Annotated[bool, typer.Option("--expand-all", help="Expand every node.")] = False,
    toggle: Annotated[list[str] | None, typer.Option(help="Toggle a visible node by name (repeatable).")] = None,
) -> None:
    """Print the visible tree with its layout positions."""
    try:
        view = HierarchyView(load_tree(data), RecordingBackend())
        if expand_all:
            view.expand_all()
        for name in toggle or ():
            view.toggle(_find(view, name))
    except (OSError, ValidationError, ValueError) as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1) from exc

    root = view.root
    output = Tree(_label(root))
    _render(root, output)
    console.print(output)
    count = len(view.last_pass) if view.last_pass is not None else 0
    console.print(f"({count} visible nodes)")
