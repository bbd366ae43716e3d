# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

import click
from rich.table import Table

from plugsmith.constants import ARCHITECTURE_SPECIFIC, ARCHITECTURES

from ..utils import console


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
def architectures() -> None:
    """Show package segments that make a factory architecture specific."""
    table = Table(title="Architectures")
    table.add_column("Package segment", style="cyan")
    table.add_column("Architecture")
    for segment, name in ARCHITECTURES.items():
        table.add_row(segment, name)
    console.print(table)
    console.print(f"[dim]Factories in these packages implement {ARCHITECTURE_SPECIFIC}[/dim]")
