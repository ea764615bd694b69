"""Assignee menu options and assignee changes for remote records.

The assign menu is a tagged-variant list so callers can match over it
exhaustively:

    RemoveAssignee(identity) | AddExisting(identity) | AddNew() | ManageTeam()
"""

from collections.abc import Sequence
from dataclasses import dataclass

from tuck.core.roster import normalize_email, validate_email
from tuck.core.types import Identity, TodoRecord


@dataclass(frozen=True)
class RemoveAssignee:
    """Remove a current assignee."""

    identity: Identity


@dataclass(frozen=True)
class AddExisting:
    """Assign a roster member who is not yet assigned."""

    identity: Identity


@dataclass(frozen=True)
class AddNew:
    """Assign someone not in the roster (prompts for email and name)."""


@dataclass(frozen=True)
class ManageTeam:
    """Leave the assign menu for roster management."""


AssignOption = RemoveAssignee | AddExisting | AddNew | ManageTeam


@dataclass(frozen=True)
class AddAssignee:
    """Assignee change: add an identity (from the roster or newly entered)."""

    identity: Identity


AssigneeChange = RemoveAssignee | AddAssignee

MAX_EMAIL_ATTEMPTS = 3


def assign_options(record: TodoRecord, roster: Sequence[Identity]) -> tuple[AssignOption, ...]:
    """Build the assign menu for a remote record.

    Current assignees come first (as removals), then roster members not
    already assigned, then the two fixed actions.
    """
    assigned = {normalize_email(a.email) for a in record.assignees}
    removals = [RemoveAssignee(identity=a) for a in record.assignees]
    additions = [
        AddExisting(identity=m) for m in roster if normalize_email(m.email) not in assigned
    ]
    return (*removals, *additions, AddNew(), ManageTeam())


def assign_option_label(option: AssignOption) -> tuple[str, str]:
    """Return (label, description) for a menu entry."""
    match option:
        case RemoveAssignee(identity=identity):
            return (f"Remove {identity.name}", identity.email)
        case AddExisting(identity=identity):
            return (f"Add {identity.name}", identity.email)
        case AddNew():
            return ("Add New Team Member", "Add someone not in the team list")
        case ManageTeam():
            return ("Manage Team", "Add/remove team members globally")


def new_assignee_email_error(email: str, record: TodoRecord) -> str | None:
    """Validate an email entered for a brand-new assignee."""
    return validate_email(
        email,
        record.assignees,
        taken_message="This person is already assigned to this TODO.",
    )
