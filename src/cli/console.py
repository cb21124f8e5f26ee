"""Console output utilities.

Usage:
    from cli.console import console, print_success, print_error

    console.print("Hello world", style="bold")
    print_success("Operation completed")
    print_error("Something went wrong")
"""

from rich.console import Console
from rich.table import Table

console = Console()


def print_success(message: str) -> None:
    """Print a success message (green checkmark)."""
    console.print(f"[green]✓[/green] {message}")


def print_error(message: str) -> None:
    """Print an error message (red X)."""
    console.print(f"[red]✗[/red] {message}")


def print_warning(message: str) -> None:
    """Print a warning message (yellow warning sign)."""
    console.print(f"[yellow]⚠[/yellow] {message}")


def create_table(title: str = "") -> Table:
    """Create a rich table, titled if a title is given."""
    return Table(title=title) if title else Table()


__all__ = [
    "console",
    "print_success",
    "print_error",
    "print_warning",
    "create_table",
]
