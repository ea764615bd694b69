"""Non-ideal outcomes returned by the TODO record engine.

Every core operation returns either a success value or one of the
dataclasses below. Each implements the NonIdealState protocol: a
user-facing `message` and a stable `error_type` code. Callers narrow the
union with isinstance checks; the CLI does so through `Ensure`.
"""

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class NonIdealState(Protocol):
    """Protocol for outcomes that did not reach the ideal state."""

    @property
    def message(self) -> str: ...

    @property
    def error_type(self) -> str: ...


@dataclass(frozen=True)
class NotFound:
    """A record lookup (by id, or by file/line/message) matched nothing."""

    message: str

    @property
    def error_type(self) -> str:
        return "not-found"


@dataclass(frozen=True)
class ValidationFailed:
    """Input was rejected; state was not mutated.

    Covers empty messages, malformed or duplicate emails, no-op edits,
    out-of-range move targets and removal of the last assignee.
    """

    message: str

    @property
    def error_type(self) -> str:
        return "validation-failed"


@dataclass(frozen=True)
class PersistenceCorrupt:
    """A backing document exists but is not a well-formed array.

    Treated as an empty collection; surfaced as a warning.
    """

    path: str
    message: str

    @property
    def error_type(self) -> str:
        return "persistence-corrupt"


@dataclass(frozen=True)
class PersistenceWriteFailed:
    """Writing a backing document failed; the operation is not committed."""

    path: str
    message: str

    @property
    def error_type(self) -> str:
        return "persistence-write-failed"


@dataclass(frozen=True)
class IdentityUnavailable:
    """No viewer identity could be derived from git configuration."""

    message: str = "Git user information not available. Please configure git first."

    @property
    def error_type(self) -> str:
        return "identity-unavailable"


@dataclass(frozen=True)
class DocumentEditFailed:
    """The source document could not be read or edited."""

    path: str
    message: str

    @property
    def error_type(self) -> str:
        return "document-edit-failed"


@dataclass(frozen=True)
class PromptCancelled:
    """The user dismissed a prompt. Distinct from a validation failure."""

    message: str = "Cancelled."

    @property
    def error_type(self) -> str:
        return "prompt-cancelled"
