# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Console output for plugsmith commands."""

from typing import Iterable, Tuple

from rich.console import Console
from rich.table import Table

console = Console()


def owner_table(rows: Iterable[Tuple[str, int, bool]]) -> Table:
    """Summary table of (owner, plugin count, generated) rows."""
    table = Table(title="Plugin factories")
    table.add_column("Owner", style="cyan")
    table.add_column("Plugins", justify="right")
    table.add_column("Status")
    for owner, count, generated in rows:
        status = "[green]generated[/green]" if generated else "[red]failed[/red]"
        table.add_row(owner, str(count), status)
    return table


def success(message: str) -> None:
    console.print(f"[green]✓[/green] {message}")


def warning(message: str, details: list[str] | None = None) -> None:
    console.print(f"[yellow]Warning:[/yellow] {message}")
    for detail in details or ():
        console.print(f"  • {detail}")
