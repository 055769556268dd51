from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

serve_app = typer.Typer(help="Start servers.")
console = Console()


@serve_app.command("dashboard")
def dashboard(
    host: str = "127.0.0.1",
    port: int = 8050,
    data: Annotated[Path | None, typer.Option(help="JSON file with {name, children} nodes.")] = None,
    profile: Annotated[str | None, typer.Option(help="Collection profile shown on the Collection tab.")] = None,
) -> None:
    """Start the Dash web dashboard."""
    from collection_tree.core.hierarchy.samples import load_tree
    from collection_tree.dashboard.app import create_dashboard

    try:
        app = create_dashboard(tree=load_tree(data), profile=profile)
    except (OSError, ValueError) as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1) from exc
    console.print(f"[green]Starting dashboard on {host}:{port}[/green]")
    app.run(host=host, port=port)
