"""Shared reporting for team roster outcomes."""

import click

from tuck.cli.ensure import Ensure
from tuck.core.flows import MembersViewed, TeamOutcome
from tuck.core.non_ideal_state import NotFound, PersistenceWriteFailed, ValidationFailed
from tuck.core.roster import MemberAdded, MemberRemoved
from tuck.output import user_output


def report_team_outcome(
    outcome: TeamOutcome | NotFound | ValidationFailed | PersistenceWriteFailed,
) -> None:
    """Print a roster outcome; non-ideal outcomes exit with status 1."""
    match outcome:
        case MemberAdded(member=member):
            user_output(click.style("✓", fg="green") + f" Added {member.name} to team")
        case MemberRemoved(member=member):
            user_output(click.style("✓", fg="green") + f" Removed {member.name} from team")
        case MembersViewed(members=members):
            if not members:
                user_output("No team members found. Add some team members first.")
                return
            user_output("Team Members:")
            for index, member in enumerate(members, start=1):
                user_output(f"{index}. {member.name} ({member.email})")
        case _:
            Ensure.ideal_state(outcome)
