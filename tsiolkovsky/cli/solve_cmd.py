"""CLI command for solving the rocket equation."""

from __future__ import annotations

import click
import numpy as np
from rich.console import Console
from rich.table import Table

from tsiolkovsky.core.rocket_equation import (
    ArgumentError,
    ComputationError,
    Quantity,
    missing_quantity,
    solve as solve_equation,
)
from tsiolkovsky.utils.validation import Severity, validate_rocket_inputs

_SEVERITY_STYLE = {
    Severity.INFO: "blue",
    Severity.WARNING: "yellow",
    Severity.ERROR: "red",
}


def parse_array(
    ctx: click.Context, param: click.Parameter, value: str | None
) -> np.ndarray | None:
    """Parse ``1``, ``1,2,3`` or ``1,2;3,4`` into a 0-d, 1-D or 2-D array.

    Rows are separated by ``;`` and columns by ``,``.
    """
    if value is None:
        return None
    try:
        rows = [[float(x) for x in row.split(",")] for row in value.split(";")]
    except ValueError:
        raise click.BadParameter(f"'{value}' is not a number list")

    if len(rows) == 1:
        row = rows[0]
        return np.asarray(row[0] if len(row) == 1 else row)
    if len({len(r) for r in rows}) != 1:
        raise click.BadParameter(f"rows of '{value}' have different lengths")
    return np.asarray(rows)


def _fmt(arr: np.ndarray) -> str:
    if arr.ndim == 0:
        return f"{float(arr):.4f}"
    return np.array2string(arr, precision=4, suppress_small=True)


@click.command("solve")
@click.option("--delta-v", callback=parse_array, help="Velocity change ΔV [km/s].")
@click.option("--isp", callback=parse_array, help="Specific impulse [s].")
@click.option("--m0", callback=parse_array, help="Initial (wet) mass [kg].")
@click.option("--me", callback=parse_array, help="Final (dry) mass [kg].")
@click.pass_context
def solve(
    ctx: click.Context,
    delta_v: np.ndarray | None,
    isp: np.ndarray | None,
    m0: np.ndarray | None,
    me: np.ndarray | None,
) -> None:
    """Compute the missing one of ΔV, Isp, M0 and Me.

    Give exactly three options. Values may be numbers, comma-separated
    rows (1,2,3) or ';'-separated matrices (1.2;2.4 is a column).
    """
    console: Console = ctx.obj.get("console", Console())
    inputs = {
        Quantity.DELTA_V: delta_v,
        Quantity.ISP: isp,
        Quantity.INITIAL_MASS: m0,
        Quantity.FINAL_MASS: me,
    }

    try:
        target = missing_quantity(delta_v, isp, m0, me)
        result = solve_equation(delta_v, isp, m0, me)
    except ArgumentError:
        console.print(
            "[red]Error:[/red] Provide exactly three of --delta-v, --isp, --m0, --me."
        )
        raise SystemExit(1)
    except ComputationError as exc:
        console.print(f"[red]Error:[/red] {exc} ({exc.__cause__})")
        raise SystemExit(1)

    console.print("\n[bold]Tsiolkovsky — Rocket Equation[/bold]\n")

    checks = validate_rocket_inputs(delta_v=delta_v, isp=isp, m0=m0, me=me)
    for msg in checks.messages:
        style = _SEVERITY_STYLE[msg.severity]
        console.print(f"[{style}]{msg.severity.value.capitalize()}:[/{style}] {msg.message}")

    table = Table(title=f"Solved for {target.label}")
    table.add_column("Parameter", style="cyan")
    table.add_column("Value", style="green", justify="right")
    table.add_column("Unit", style="dim")

    for q, value in inputs.items():
        if value is not None:
            table.add_row(q.label, _fmt(value), q.unit)
    table.add_row(f"[bold]{target.label}[/bold]", f"[bold]{_fmt(result)}[/bold]", target.unit)

    console.print(table)
    if result.ndim > 0:
        console.print(f"[dim]Result shape: {result.shape}[/dim]")
