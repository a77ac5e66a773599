"""CLI command listing the rocket equation quantities."""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table

from tsiolkovsky.core.rocket_equation import Quantity


@click.command("quantities")
@click.pass_context
def quantities(ctx: click.Context) -> None:
    """List the four quantities, their options and units."""
    console: Console = ctx.obj.get("console", Console())
    table = Table(title="Rocket Equation Quantities")
    table.add_column("Quantity", style="cyan")
    table.add_column("Option", style="green")
    table.add_column("Unit", style="dim")

    for q in Quantity:
        table.add_row(q.label, "--" + q.value.replace("_", "-"), q.unit)
    console.print(table)
