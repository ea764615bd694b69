"""Type definitions for TODO records.

This module contains immutable dataclasses for the identities and TODO
records that flow between the extractor, the stores and the engine.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

TodoKind = Literal["local", "remote"]


@dataclass(frozen=True)
class Identity:
    """A person known to tuck.

    Email is the unique key when matching authors, assignees, roster
    members and the viewer.

    Attributes:
        name: Display name (e.g., git user.name)
        email: Email address (e.g., git user.email)
    """

    name: str
    email: str


@dataclass(frozen=True)
class TodoAnnotation:
    """A TODO annotation found in one line of source text.

    Attributes:
        message: Trimmed TODO text
        offset: Character offset of the comment prefix within the line,
            None for the whole-line fallback annotation
    """

    message: str
    offset: int | None


@dataclass(frozen=True)
class TodoRecord:
    """A TODO detached from its source comment.

    Local records carry no author, assignees or timestamps. Remote records
    always have an author, at least one assignee, and ISO 8601 timestamps.

    Attributes:
        file: Absolute path of the source file the TODO belongs to
        line: Zero-based line index at the time of last placement
        kind: "local" or "remote"
        message: Non-empty trimmed TODO text
        id: Stable identity token, unique within one store
        column: Intra-line offset, set only when several TODOs shared a line
        author: Creator of a remote record
        assignees: Remote assignees, unique by email, in assignment order
        created_at: ISO 8601 creation timestamp (remote only)
        updated_at: ISO 8601 last-mutation timestamp (remote only)
    """

    file: str
    line: int
    kind: TodoKind
    message: str
    id: str
    column: int | None
    author: Identity | None
    assignees: tuple[Identity, ...]
    created_at: str | None
    updated_at: str | None

    @property
    def is_remote(self) -> bool:
        return self.kind == "remote"

    def is_assigned(self, email: str) -> bool:
        """Check whether an email is among the assignees (exact match)."""
        return any(assignee.email == email for assignee in self.assignees)

    @staticmethod
    def test(
        *,
        file: str = "/repo/src/app.py",
        line: int = 0,
        kind: TodoKind = "local",
        message: str = "fix bug",
        id: str | None = None,
        column: int | None = None,
        author: Identity | None = None,
        assignees: tuple[Identity, ...] | None = None,
        created_at: str | None = None,
        updated_at: str | None = None,
    ) -> TodoRecord:
        """Create a TodoRecord with sensible test defaults.

        Remote records default to an author who is also the sole assignee.
        """
        if kind == "remote":
            if author is None:
                author = Identity(name="Ada", email="ada@example.com")
            if assignees is None:
                assignees = (author,)
            if created_at is None:
                created_at = "2024-01-15T10:30:00+00:00"
            if updated_at is None:
                updated_at = created_at
        record_id = id if id is not None else f"{file}:{line}:{column or 0}"
        return TodoRecord(
            file=file,
            line=line,
            kind=kind,
            message=message,
            id=record_id,
            column=column,
            author=author,
            assignees=assignees if assignees is not None else (),
            created_at=created_at,
            updated_at=updated_at,
        )


def local_record_id(file: str, line: int, offset: int | None) -> str:
    """Derive the deterministic id of a local record."""
    return f"{file}:{line}:{offset or 0}"


def remote_record_id(file: str, line: int, offset: int | None, created_millis: int) -> str:
    """Derive the id of a remote record.

    The creation timestamp keeps ids unique when the same position is
    converted repeatedly.
    """
    return f"remote-{file}:{line}:{offset or 0}:{created_millis}"
