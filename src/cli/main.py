"""Hoist CLI entry point."""

import logging

import typer

from . import __version__
from .console import console
from .features import list_command, names_command
from .make_command import make_command

app = typer.Typer(
    name="hoist",
    help="Hoist - feature flag discovery for your application",
    no_args_is_help=True,
)

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"hoist version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-V",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
) -> None:
    """Hoist - feature flag discovery for your application."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )


# Register the make command
app.command(name="make")(make_command)

# Register the query commands
app.command(name="list")(list_command)
app.command(name="names")(names_command)


if __name__ == "__main__":
    app()
