"""List command - show stored TODOs."""

import json

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from tuck.cli.core import display_path, resolve_source_path, zero_based_line
from tuck.cli.ensure import Ensure
from tuck.core.context import TuckContext
from tuck.core.json_format import record_to_json
from tuck.core.types import TodoKind, TodoRecord
from tuck.output import machine_output, user_output


def _assignee_summary(record: TodoRecord) -> str:
    if not record.is_remote:
        return "-"
    return ", ".join(assignee.name for assignee in record.assignees)


@click.command("list")
@click.option("--local", "only_local", is_flag=True, help="Only local TODOs")
@click.option("--remote", "only_remote", is_flag=True, help="Only remote TODOs visible to you")
@click.option("--file", "file", default=None, help="Only TODOs of this file")
@click.option("--line", "line", type=int, default=None, help="Only TODOs on this 1-based line")
@click.option("--json", "as_json", is_flag=True, help="Print records as JSON on stdout")
@click.pass_obj
def list_cmd(
    ctx: TuckContext,
    only_local: bool,
    only_remote: bool,
    file: str | None,
    line: int | None,
    as_json: bool,
) -> None:
    """List local TODOs and the remote TODOs you authored or are assigned to."""
    Ensure.invariant(not (only_local and only_remote), "--local and --remote are exclusive")
    kind: TodoKind | None = None
    if only_local:
        kind = "local"
    elif only_remote:
        kind = "remote"

    file_filter = str(resolve_source_path(ctx, file)) if file is not None else None
    line_filter = zero_based_line(line) if line is not None else None

    listing = Ensure.ideal_state(ctx.engine.list_todos(kind, file=file_filter, line=line_filter))
    Ensure.warn_all(listing.warnings)

    if as_json:
        machine_output(json.dumps([record_to_json(r) for r in listing.records], indent=2))
        return

    if not listing.records:
        user_output("No TODOs found.")
        return

    table = Table(show_header=True, header_style="bold", box=None)
    table.add_column("Id", style="dim", no_wrap=True)
    table.add_column("Kind", no_wrap=True)
    table.add_column("Location", style="cyan", no_wrap=True)
    table.add_column("Message")
    table.add_column("Assignees", style="yellow")
    for record in listing.records:
        kind_display = "[magenta]remote[/magenta]" if record.is_remote else "[green]local[/green]"
        table.add_row(
            escape(record.id),
            kind_display,
            escape(f"{display_path(ctx, record.file)}:{record.line + 1}"),
            escape(record.message),
            escape(_assignee_summary(record)),
        )

    console = Console(stderr=True, force_terminal=True, width=200)
    console.print(table)
