"""Prompt-driven flows for move, assign and team management.

Flows ask the user through a Prompter and delegate every mutation to the
engine or roster. Cancellation at any prompt returns PromptCancelled and
mutates nothing.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from tuck.core.assignment import (
    MAX_EMAIL_ATTEMPTS,
    AddAssignee,
    AddExisting,
    AddNew,
    AssignOption,
    ManageTeam,
    RemoveAssignee,
    assign_option_label,
    assign_options,
    new_assignee_email_error,
)
from tuck.core.engine import TodoEngine, move_target_error
from tuck.core.non_ideal_state import (
    DocumentEditFailed,
    NotFound,
    PersistenceWriteFailed,
    PromptCancelled,
    ValidationFailed,
)
from tuck.core.results import TodoUpdated
from tuck.core.roster import (
    MemberAdded,
    MemberConflict,
    MemberRemoved,
    TeamRoster,
    validate_email,
)
from tuck.core.types import Identity, TodoRecord
from tuck.gateway.prompter.abc import Choice, Prompter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AddMember:
    """Team menu: add a new member."""


@dataclass(frozen=True)
class RemoveMember:
    """Team menu: remove this member."""

    identity: Identity


@dataclass(frozen=True)
class ViewMembers:
    """Team menu: show every member."""


TeamOption = AddMember | RemoveMember | ViewMembers


@dataclass(frozen=True)
class MembersViewed:
    """Result of the view action."""

    members: tuple[Identity, ...]


TeamOutcome = (
    MemberAdded
    | MemberRemoved
    | MembersViewed
    | MemberConflict
    | NotFound
    | PersistenceWriteFailed
    | PromptCancelled
)


def team_options(members: tuple[Identity, ...]) -> tuple[TeamOption, ...]:
    return (AddMember(), *(RemoveMember(identity=m) for m in members), ViewMembers())


def team_option_label(option: TeamOption) -> tuple[str, str]:
    match option:
        case AddMember():
            return ("Add Team Member", "Add a new team member")
        case RemoveMember(identity=identity):
            return (f"Remove {identity.name}", identity.email)
        case ViewMembers():
            return ("View All Members", "List all current team members")


def run_manage_team(roster: TeamRoster, prompter: Prompter) -> TeamOutcome:
    """Show the team menu once and perform the selected action."""
    members = roster.members()
    choices: list[Choice[TeamOption]] = []
    for option in team_options(members):
        label, description = team_option_label(option)
        choices.append(Choice(label=label, description=description, value=option))

    selected = prompter.choose("Choose team management action", choices)
    if isinstance(selected, PromptCancelled):
        return selected

    match selected:
        case AddMember():
            email = prompter.text(
                "Enter team member email",
                default=None,
                validate=lambda value: validate_email(
                    value, members, taken_message="This person is already in the team"
                ),
            )
            if isinstance(email, PromptCancelled):
                return email
            name = prompter.text("Enter team member name", default=None, validate=None)
            if isinstance(name, PromptCancelled):
                return name
            return roster.add(Identity(name=name.strip(), email=email.strip()))
        case RemoveMember(identity=identity):
            return roster.remove(identity.email)
        case ViewMembers():
            return MembersViewed(members=members)


def prompt_move(
    engine: TodoEngine, prompter: Prompter, record: TodoRecord
) -> (
    TodoUpdated
    | NotFound
    | ValidationFailed
    | DocumentEditFailed
    | PersistenceWriteFailed
    | PromptCancelled
):
    """Ask for a destination line, re-prompting until it is in range."""
    lines = engine.documents.read_lines(Path(record.file))
    if isinstance(lines, DocumentEditFailed):
        return lines
    line_count = len(lines)

    answer = prompter.text(
        f"Enter the line number to move this TODO on top of (1-{line_count})",
        default=None,
        validate=lambda value: move_target_error(value, line_count),
    )
    if isinstance(answer, PromptCancelled):
        return answer
    return engine.move(record.kind, record.id, int(answer.strip()))


def run_assign(
    engine: TodoEngine, prompter: Prompter, record: TodoRecord
) -> TodoUpdated | TeamOutcome | NotFound | ValidationFailed | PersistenceWriteFailed:
    """Show the assign menu for a remote record and apply the selection.

    Choosing "Manage Team" runs the team flow instead and returns its
    outcome; the record is not touched.
    """
    if not record.is_remote:
        return ValidationFailed(message="Only remote TODOs have assignees.")

    choices: list[Choice[AssignOption]] = []
    for option in assign_options(record, engine.roster.members()):
        label, description = assign_option_label(option)
        choices.append(Choice(label=label, description=description, value=option))

    selected = prompter.choose("Choose assignee action", choices)
    if isinstance(selected, PromptCancelled):
        return selected

    match selected:
        case RemoveAssignee():
            return engine.change_assignees(record.id, selected)
        case AddExisting(identity=identity):
            return engine.change_assignees(record.id, AddAssignee(identity=identity))
        case AddNew():
            return _add_new_assignee(engine, prompter, record)
        case ManageTeam():
            return run_manage_team(engine.roster, prompter)


def _add_new_assignee(
    engine: TodoEngine, prompter: Prompter, record: TodoRecord
) -> TodoUpdated | NotFound | ValidationFailed | PersistenceWriteFailed | PromptCancelled:
    email = _prompt_assignee_email(prompter, record)
    if not isinstance(email, str):
        return email

    name = prompter.text("Enter assignee name", default=None, validate=None)
    if isinstance(name, PromptCancelled):
        return name
    identity = Identity(name=name.strip(), email=email)

    updated = engine.change_assignees(record.id, AddAssignee(identity=identity))
    if not isinstance(updated, TodoUpdated):
        return updated

    add_to_team = prompter.confirm("Add this person to your team list for future use?")
    if add_to_team is True:
        added = engine.roster.add(identity)
        if isinstance(added, MemberAdded):
            prompter.notify(f"Added {identity.name} to team")
        else:
            prompter.notify(added.message)
    return updated


def _prompt_assignee_email(
    prompter: Prompter, record: TodoRecord
) -> str | ValidationFailed | PromptCancelled:
    """Ask for a new assignee's email, allowing a fixed number of failed attempts."""
    for _ in range(MAX_EMAIL_ATTEMPTS):
        answer = prompter.text("Enter assignee email", default=None, validate=None)
        if isinstance(answer, PromptCancelled):
            return PromptCancelled(message="Assignee addition cancelled.")
        error = new_assignee_email_error(answer, record)
        if error is None:
            return answer.strip()
        prompter.notify(error)

    logger.debug("Giving up on new assignee for %s", record.id)
    return ValidationFailed(
        message=f"Assignee addition cancelled after {MAX_EMAIL_ATTEMPTS} failed attempts."
    )
