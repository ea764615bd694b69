"""Restore command - turn a stored TODO back into a source comment."""

import click

from tuck.cli.core import display_path, kind_from_flag, resolve_record
from tuck.cli.ensure import Ensure
from tuck.core.context import TuckContext
from tuck.output import user_output


@click.command("restore")
@click.argument("todo_id", metavar="ID")
@click.option("--remote", is_flag=True, help="ID refers to a remote TODO")
@click.pass_obj
def restore_cmd(ctx: TuckContext, todo_id: str, remote: bool) -> None:
    """Insert the TODO with ID as a comment above its line and drop the record."""
    record = resolve_record(ctx, kind_from_flag(remote), todo_id)
    result = Ensure.ideal_state(ctx.engine.restore(record))
    location = f"{display_path(ctx, record.file)}:{result.cursor_line + 1}:{result.cursor_column + 1}"
    user_output(click.style("✓", fg="green") + f" Restored comment at {location}")
    user_output(click.style(f"  {result.comment.strip()}", dim=True))
