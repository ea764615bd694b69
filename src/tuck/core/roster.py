"""Team roster: the identities offered as assignee suggestions."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from tuck.core.non_ideal_state import NotFound, PersistenceWriteFailed
from tuck.core.types import Identity
from tuck.gateway.team_store.abc import TeamLoad, TeamStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MemberAdded:
    """Success result from adding a team member."""

    member: Identity


@dataclass(frozen=True)
class MemberRemoved:
    """Success result from removing a team member."""

    member: Identity


@dataclass(frozen=True)
class MemberConflict:
    """A member with the same email already exists. Implements NonIdealState."""

    email: str
    message: str

    @property
    def error_type(self) -> str:
        return "member-conflict"


def normalize_email(email: str) -> str:
    """Comparison key for case-insensitive email matching."""
    return email.strip().lower()


def validate_email(email: str, taken: Sequence[Identity], *, taken_message: str) -> str | None:
    """Validate an email typed by the user.

    Rules: non-empty after trimming, contains "@", and not already present
    in `taken` (case-insensitive, whitespace-trimmed).

    Returns:
        An error message, or None when the email is acceptable
    """
    trimmed = email.strip()
    if not trimmed:
        return "Email is required. Please enter a valid email address."
    if "@" not in trimmed:
        return "Please enter a valid email address (must contain @)."
    normalized = normalize_email(trimmed)
    if any(normalize_email(identity.email) == normalized for identity in taken):
        return taken_message
    return None


class TeamRoster:
    """Flat, email-deduplicated list of team members for one project.

    Order is insertion order. Constructed once per running instance and
    shared by the engine and the CLI.
    """

    def __init__(self, store: TeamStore, project_root: Path) -> None:
        self._store = store
        self._project_root = project_root

    def load(self) -> TeamLoad:
        return self._store.load(self._project_root)

    def members(self) -> tuple[Identity, ...]:
        return self.load().members

    def add(self, member: Identity) -> MemberAdded | MemberConflict | PersistenceWriteFailed:
        """Add a member; duplicates by exact email match are rejected."""
        existing = self.members()
        if any(m.email == member.email for m in existing):
            return MemberConflict(
                email=member.email,
                message=f"Team member with email {member.email} already exists.",
            )

        failure = self._store.save(self._project_root, (*existing, member))
        if failure is not None:
            return failure
        logger.debug("Added team member %s", member.email)
        return MemberAdded(member=member)

    def remove(self, email: str) -> MemberRemoved | NotFound | PersistenceWriteFailed:
        """Remove the member with exactly this email."""
        existing = self.members()
        removed = [m for m in existing if m.email == email]
        if not removed:
            return NotFound(message=f"Team member with email {email} not found.")

        failure = self._store.save(
            self._project_root, tuple(m for m in existing if m.email != email)
        )
        if failure is not None:
            return failure
        logger.debug("Removed team member %s", email)
        return MemberRemoved(member=removed[0])
