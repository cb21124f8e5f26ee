"""Feature query commands: list discovered features and their names."""

from typing import List, Optional

import typer

from hoist.data import FeatureData
from hoist.discovery import FeatureDiscovery, create_discovery

from .console import console, create_table, print_error
from .project import ensure_importable, load_project_config


def _discovery(config_path: str | None) -> FeatureDiscovery:
    config = load_project_config(config_path)
    ensure_importable(config)
    return create_discovery(config)


def _truncate(value: str, width: int) -> str:
    if len(value) > width:
        return value[: width - 3] + "..."
    return value


def list_command(
    tag: Optional[List[str]] = typer.Option(
        None,
        "--tag",
        "-t",
        help="Only show features with this tag (repeatable, all must match)",
    ),
    any_tag: bool = typer.Option(
        False,
        "--any",
        help="Match features with ANY of the given tags instead of all",
    ),
    config_path: str | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to hoist.yaml (default: search from current directory)",
    ),
) -> None:
    """List discovered features with their metadata."""
    discovery = _discovery(config_path)

    try:
        if tag and any_tag:
            features = discovery.with_any_tags(tag)
        elif tag:
            features = discovery.with_tags(tag)
        else:
            features = discovery.all()
    except Exception as e:
        print_error(f"Failed to load features: {e}")
        raise typer.Exit(1)

    if not features:
        console.print("[dim]No features found.[/dim]")
        if tag:
            console.print("[dim]Try removing tag filters to see all features.[/dim]")
        return

    console.print(_features_table(features))


def _features_table(features: List[FeatureData]):
    table = create_table("Features")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Label", style="green")
    table.add_column("Set", style="magenta")
    table.add_column("Tags", style="blue")
    table.add_column("Description", style="dim")

    for feature in features:
        table.add_row(
            feature.name,
            feature.label,
            feature.feature_set or "",
            ", ".join(feature.tags),
            _truncate(feature.description or "", 40),
        )
    return table


def names_command(
    config_path: str | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to hoist.yaml (default: search from current directory)",
    ),
) -> None:
    """Print the name of every discovered feature, one per line."""
    discovery = _discovery(config_path)

    try:
        names = discovery.names()
    except Exception as e:
        print_error(f"Failed to load features: {e}")
        raise typer.Exit(1)

    for name in names:
        typer.echo(name)
