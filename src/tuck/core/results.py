"""Success results returned by the TODO record engine."""

from dataclasses import dataclass

from tuck.core.non_ideal_state import DocumentEditFailed, PersistenceCorrupt
from tuck.core.types import Identity, TodoRecord


@dataclass(frozen=True)
class TodosConverted:
    """Comment -> record conversion committed.

    Attributes:
        records: Records created, in left-to-right order on the line
        source_edit_failure: Set when the records were stored but removing
            the comment from the source failed (records stay authoritative)
        store_warning: Set when the store document was corrupt and has been
            replaced by the new records
    """

    records: tuple[TodoRecord, ...]
    source_edit_failure: DocumentEditFailed | None
    store_warning: PersistenceCorrupt | None = None


@dataclass(frozen=True)
class TodoAdded:
    """A remote record was created without a source comment.

    `store_warning` is set when a corrupt remote document was replaced.
    """

    record: TodoRecord
    store_warning: PersistenceCorrupt | None = None


@dataclass(frozen=True)
class TodoRestored:
    """Record -> comment conversion committed.

    Attributes:
        record: The record that was turned back into a comment
        comment: The inserted comment line
        cursor_line: Zero-based line of the inserted comment
        cursor_column: Column at the end of the inserted text
    """

    record: TodoRecord
    comment: str
    cursor_line: int
    cursor_column: int


@dataclass(frozen=True)
class TodoUpdated:
    """A record was mutated in place (message, line or assignees)."""

    before: TodoRecord
    after: TodoRecord


@dataclass(frozen=True)
class TodosRemoved:
    """Records deleted by a remove operation; empty when nothing matched."""

    removed: tuple[TodoRecord, ...]


@dataclass(frozen=True)
class TodoListing:
    """Records returned by a listing, local first, in stored order.

    Attributes:
        records: Matching records
        viewer: Identity used for remote visibility, None when unavailable
        warnings: Corrupt documents that were read as empty
    """

    records: tuple[TodoRecord, ...]
    viewer: Identity | None
    warnings: tuple[PersistenceCorrupt, ...]
