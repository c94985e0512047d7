"""Console output helpers for the slotnet CLI."""

import json

from rich.console import Console
from rich.markup import escape

console = Console()
err_console = Console(stderr=True)


def print_error(message: str) -> None:
    err_console.print(f"[bold red]Error:[/bold red] {escape(message)}")


def print_success(message: str) -> None:
    console.print(f"[green]{escape(message)}[/green]")


def print_json(data) -> None:
    # Plain print so output stays machine readable (no rich markup/wrapping)
    print(json.dumps(data, indent=2))
