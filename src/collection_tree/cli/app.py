import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from collection_tree.cli.collection import collection_app
from collection_tree.cli.serve import serve_app
from collection_tree.cli.tree import tree_app

app = typer.Typer(
    name="collection-tree",
    help="Collection Tree CLI: generate API collections and explore collapsible hierarchies.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.add_typer(collection_app, name="collection")
app.add_typer(tree_app, name="tree")
app.add_typer(serve_app, name="serve")


@app.callback()
def configure(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


def main() -> None:
    app()
