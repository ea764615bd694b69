"""Scan command - show lines carrying a convertible TODO comment."""

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from tuck.cli.core import display_path, resolve_source_path
from tuck.cli.ensure import Ensure
from tuck.core.context import TuckContext
from tuck.output import user_output


@click.command("scan")
@click.argument("file")
@click.pass_obj
def scan_cmd(ctx: TuckContext, file: str) -> None:
    """List TODO comments in FILE that can be converted."""
    path = resolve_source_path(ctx, file)
    found = Ensure.ideal_state(ctx.engine.scan(path))
    if not found:
        user_output(f"No TODO comments found in {display_path(ctx, str(path))}")
        return

    table = Table(show_header=True, header_style="bold", box=None)
    table.add_column("Line", style="cyan", no_wrap=True, justify="right")
    table.add_column("Comment", no_wrap=True)
    for index, text in found:
        table.add_row(str(index + 1), escape(text.strip()))

    console = Console(stderr=True, force_terminal=True, width=200)
    console.print(table)
