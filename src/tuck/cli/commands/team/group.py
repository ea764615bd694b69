"""Team command group - manage the roster of suggested assignees."""

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from tuck.cli.commands.team.report import report_team_outcome
from tuck.cli.ensure import Ensure
from tuck.core.context import TuckContext
from tuck.core.flows import run_manage_team
from tuck.core.roster import validate_email
from tuck.core.types import Identity
from tuck.output import user_output


@click.group("team")
def team_group() -> None:
    """Manage team members offered as assignees."""


@team_group.command("list")
@click.pass_obj
def team_list(ctx: TuckContext) -> None:
    """List team members."""
    loaded = ctx.roster.load()
    if loaded.corrupt is not None:
        Ensure.warn(loaded.corrupt)
    if not loaded.members:
        user_output("No team members found. Add some team members first.")
        return

    table = Table(show_header=True, header_style="bold", box=None)
    table.add_column("Name", no_wrap=True)
    table.add_column("Email", style="cyan", no_wrap=True)
    for member in loaded.members:
        table.add_row(escape(member.name), escape(member.email))

    console = Console(stderr=True, force_terminal=True, width=200)
    console.print(table)


@team_group.command("add")
@click.argument("email")
@click.argument("name")
@click.pass_obj
def team_add(ctx: TuckContext, email: str, name: str) -> None:
    """Add a team member."""
    error = validate_email(email, (), taken_message="")
    Ensure.invariant(error is None, error or "")
    Ensure.invariant(bool(name.strip()), "Name is required.")
    report_team_outcome(ctx.roster.add(Identity(name=name.strip(), email=email.strip())))


@team_group.command("remove")
@click.argument("email")
@click.pass_obj
def team_remove(ctx: TuckContext, email: str) -> None:
    """Remove the team member with EMAIL."""
    report_team_outcome(ctx.roster.remove(email.strip()))


@team_group.command("manage")
@click.pass_obj
def team_manage(ctx: TuckContext) -> None:
    """Interactive team menu: add, remove or view members."""
    report_team_outcome(run_manage_team(ctx.roster, ctx.prompter))
