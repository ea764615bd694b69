"""Per-viewer visibility of remote TODO records."""

from collections.abc import Iterable

from tuck.core.types import TodoRecord


def is_visible(record: TodoRecord, viewer_email: str) -> bool:
    """A remote record is visible to its author and to each assignee.

    Email comparison is exact (case-sensitive). Local records never pass;
    membership in the local store is their only visibility boundary.
    """
    if not record.is_remote:
        return False
    if record.author is not None and record.author.email == viewer_email:
        return True
    return record.is_assigned(viewer_email)


def visible_records(records: Iterable[TodoRecord], viewer_email: str) -> tuple[TodoRecord, ...]:
    """Filter remote records down to those visible to the viewer, in order."""
    return tuple(record for record in records if is_visible(record, viewer_email))
