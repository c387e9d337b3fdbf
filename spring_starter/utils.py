"""Shared console helpers.

All user-facing output goes through the single Rich ``console`` defined here
so tests can capture or silence it in one place.
"""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

console = Console()


def print_banner(title: str, lines: dict[str, str]) -> None:
    """Print a boxed banner with aligned ``label : value`` rows."""
    width = max((len(label) for label in lines), default=0)
    body = "\n".join(f"{label.ljust(width)} : {value}" for label, value in lines.items())
    console.print(
        Panel(
            f"[bold bright_cyan]{title}[/bold bright_cyan]\n{body}",
            border_style="bright_cyan",
        )
    )


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_section(title: str) -> None:
    """Print a bold section heading preceded by a blank line."""
    console.print()
    console.print(f"[bold cyan]{title}[/bold cyan]")


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")
