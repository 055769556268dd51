from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from collection_tree.core.collection import METADATA_FILE_NAME, build, count_requests, generate
from collection_tree.core.config import CollectionConfig
from collection_tree.core.profiles import PROFILES

collection_app = typer.Typer(help="Generate Postman collections.")
console = Console()

_RULE = "=" * 40


def _load_config(
    profile: str | None,
    output_dir: Path | None,
    base_url: str | None,
    name: str | None,
    build_number: str | None,
) -> CollectionConfig:
    config = CollectionConfig.from_env()
    overrides = {
        "profile": profile,
        "output_dir": output_dir,
        "base_url": base_url,
        "collection_name": name,
        "build_number": build_number,
    }
    return config.model_copy(update={k: v for k, v in overrides.items() if v})


@collection_app.command("generate")
def generate_command(
    profile: Annotated[str | None, typer.Option(help="Fixture profile (standard, extended).")] = None,
    output_dir: Annotated[Path | None, typer.Option(help="Directory for the generated files.")] = None,
    base_url: Annotated[str | None, typer.Option(help="Base URL substituted into every request.")] = None,
    name: Annotated[str | None, typer.Option(help="Collection name.")] = None,
    build_number: Annotated[str | None, typer.Option(help="Build identifier.")] = None,
) -> None:
    """Write the collection and its metadata file.

    Unset options fall back to API_BASE_URL, COLLECTION_NAME, BUILD_NUMBER,
    OUTPUT_DIR and COLLECTION_PROFILE.
    """
    config = _load_config(profile, output_dir, base_url, name, build_number)
    try:
        result = generate(config)
    except ValueError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1) from exc
    except OSError as exc:
        console.print(f"[red]Could not write collection: {exc}[/red]")
        raise typer.Exit(1) from exc

    console.print(_RULE)
    console.print("[green]Postman Collection Generated Successfully[/green]")
    console.print(_RULE)
    console.print(f"Collection Name: {result.document.info.name}", markup=False)
    console.print(f"Build Number: {config.build_number}", markup=False)
    console.print(f"Base URL: {config.base_url}", markup=False)
    console.print(f"Output File: {result.paths.collection}", markup=False)
    console.print(f"Requests: {result.metadata.request_count}")
    console.print(_RULE)
    console.print(f"Metadata file created: {METADATA_FILE_NAME}")


@collection_app.command("profiles")
def profiles() -> None:
    """List the available fixture profiles."""
    config = CollectionConfig.from_env()
    table = Table(show_lines=False)
    table.add_column("profile")
    table.add_column("requests")
    table.add_column("description")
    for profile in PROFILES.values():
        doc = build(config, profile.name)
        table.add_row(profile.name, str(count_requests(doc)), profile.description)
    console.print(table)
