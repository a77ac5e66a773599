"""Tsiolkovsky command-line interface.

Entry point for the ``tsiolkovsky`` CLI tool.
"""

from __future__ import annotations

import click
from rich.console import Console

from tsiolkovsky import __app_name__, __version__

console = Console()


@click.group()
@click.version_option(version=__version__, prog_name=__app_name__)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Tsiolkovsky — rocket equation solver.

    Give three of ΔV, Isp, M0 and Me; the fourth is computed.
    """
    ctx.ensure_object(dict)
    ctx.obj["console"] = console


# Import and register sub-commands
from tsiolkovsky.cli.solve_cmd import solve  # noqa: E402
from tsiolkovsky.cli.info_cmd import quantities  # noqa: E402

cli.add_command(solve)
cli.add_command(quantities)


def main() -> None:
    """Convenience wrapper for entry-point scripts."""
    cli()
