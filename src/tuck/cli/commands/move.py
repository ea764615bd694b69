"""Move command - attach a stored TODO to another line."""

import click

from tuck.cli.core import format_location, kind_from_flag, resolve_record
from tuck.cli.ensure import Ensure
from tuck.core.context import TuckContext
from tuck.core.flows import prompt_move
from tuck.output import user_output


@click.command("move")
@click.argument("todo_id", metavar="ID")
@click.argument("line", type=int, required=False)
@click.option("--remote", is_flag=True, help="ID refers to a remote TODO")
@click.pass_obj
def move_cmd(ctx: TuckContext, todo_id: str, line: int | None, remote: bool) -> None:
    """Move the TODO with ID to 1-based LINE of its file (prompts when omitted)."""
    kind = kind_from_flag(remote)
    record = resolve_record(ctx, kind, todo_id)
    if line is None:
        outcome = prompt_move(ctx.engine, ctx.prompter, record)
    else:
        outcome = ctx.engine.move(kind, record.id, line)
    result = Ensure.ideal_state(outcome)
    user_output(click.style("✓", fg="green") + f" TODO moved to {format_location(ctx, result.after)}")
