"""Remove command - delete a stored TODO."""

import click

from tuck.cli.core import kind_from_flag, resolve_record
from tuck.cli.ensure import Ensure
from tuck.core.context import TuckContext
from tuck.output import user_output


@click.command("remove")
@click.argument("todo_id", metavar="ID")
@click.option("--remote", is_flag=True, help="ID refers to a remote TODO")
@click.pass_obj
def remove_cmd(ctx: TuckContext, todo_id: str, remote: bool) -> None:
    """Delete the TODO with ID without restoring it to the source.

    Local TODOs are removed by file, line and message, so identical TODOs
    on the same line are removed together.
    """
    record = resolve_record(ctx, kind_from_flag(remote), todo_id)
    result = Ensure.ideal_state(ctx.engine.remove(record))
    if not result.removed:
        user_output(f'TODO "{record.message}" was already removed.')
        return
    user_output(click.style("✓", fg="green") + f' TODO "{record.message}" removed.')
    if len(result.removed) > 1:
        user_output(f"  {len(result.removed)} identical TODOs on that line were removed.")
