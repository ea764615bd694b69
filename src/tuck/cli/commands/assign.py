"""Assign command - add or remove assignees of a remote TODO."""

import click

from tuck.cli.commands.team.report import report_team_outcome
from tuck.cli.core import resolve_record
from tuck.core.context import TuckContext
from tuck.core.flows import run_assign
from tuck.core.results import TodoUpdated
from tuck.output import user_output


@click.command("assign")
@click.argument("todo_id", metavar="ID")
@click.pass_obj
def assign_cmd(ctx: TuckContext, todo_id: str) -> None:
    """Change who is assigned to the remote TODO with ID."""
    record = resolve_record(ctx, "remote", todo_id)
    outcome = run_assign(ctx.engine, ctx.prompter, record)
    if not isinstance(outcome, TodoUpdated):
        report_team_outcome(outcome)
        return

    before = {a.email for a in outcome.before.assignees}
    after = {a.email for a in outcome.after.assignees}
    for assignee in outcome.after.assignees:
        if assignee.email not in before:
            user_output(click.style("✓", fg="green") + f" Added {assignee.name} as assignee")
    for assignee in outcome.before.assignees:
        if assignee.email not in after:
            user_output(click.style("✓", fg="green") + f" Removed {assignee.name} from assignees")
