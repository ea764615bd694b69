"""Edit command - change the message of a stored TODO."""

import click

from tuck.cli.core import kind_from_flag, resolve_record
from tuck.cli.ensure import Ensure
from tuck.core.context import TuckContext
from tuck.output import user_output


def _message_error(value: str) -> str | None:
    if not value.strip():
        return "TODO message cannot be empty."
    return None


@click.command("edit")
@click.argument("todo_id", metavar="ID")
@click.argument("message", required=False)
@click.option("--remote", is_flag=True, help="ID refers to a remote TODO")
@click.pass_obj
def edit_cmd(ctx: TuckContext, todo_id: str, message: str | None, remote: bool) -> None:
    """Replace the message of the TODO with ID (prompts when MESSAGE is omitted)."""
    kind = kind_from_flag(remote)
    record = resolve_record(ctx, kind, todo_id)
    if message is None:
        message = Ensure.ideal_state(
            ctx.prompter.text("Edit TODO message", default=record.message, validate=_message_error)
        )

    result = Ensure.ideal_state(ctx.engine.update_message(kind, record.id, message))
    user_output(click.style("✓", fg="green") + f' TODO updated to "{result.after.message}".')
