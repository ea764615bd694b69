"""Convert command - turn a TODO comment into stored records."""

import click

from tuck.cli.core import format_location, kind_from_flag, resolve_source_path, zero_based_line
from tuck.cli.ensure import Ensure
from tuck.core.context import TuckContext
from tuck.output import user_output


@click.command("convert")
@click.argument("file")
@click.argument("line", type=int)
@click.option("--remote", is_flag=True, help="Create shared remote TODOs assigned to you")
@click.pass_obj
def convert_cmd(ctx: TuckContext, file: str, line: int, remote: bool) -> None:
    """Move the TODO comment(s) on LINE of FILE into the TODO store.

    The comment is removed from the source: the whole line when it only
    holds the comment, otherwise just the comment text.
    """
    kind = kind_from_flag(remote)
    path = resolve_source_path(ctx, file)
    result = Ensure.ideal_state(ctx.engine.convert(path, zero_based_line(line), kind))

    for record in result.records:
        user_output(
            click.style("✓", fg="green")
            + f' Converted to {kind} TODO "{record.message}" at {format_location(ctx, record)}'
        )
        user_output(click.style(f"  id: {record.id}", dim=True))
    if result.store_warning is not None:
        Ensure.warn(result.store_warning)
    if result.source_edit_failure is not None:
        Ensure.warn(result.source_edit_failure)
