"""TODO record engine: transitions between source comments and stored records.

A TODO is either an embedded comment (lives only in source text) or a
stored record (lives only in a record store). The engine moves TODOs
between those states and mutates stored records. Every operation returns a
success value from `tuck.core.results` or a NonIdealState; nothing raises
for expected conditions.

Ordering rules:
- Convert commits the store write first; the source edit is secondary.
- Restore inserts the comment first; if the store write then fails the
  inserted line is removed again.
- Every mutating operation clears the read cache before returning.
"""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, replace
from pathlib import Path

from tuck.core.assignment import AddAssignee, AssigneeChange, RemoveAssignee
from tuck.core.cache import ReadCache
from tuck.core.extractor import (
    comment_prefix_for,
    comment_start,
    extract_todos,
    find_todo_comments,
    format_todo_comment,
    has_todo_comment,
    leading_indent,
)
from tuck.core.locking import ProjectLocks
from tuck.core.non_ideal_state import (
    DocumentEditFailed,
    IdentityUnavailable,
    NotFound,
    PersistenceCorrupt,
    PersistenceWriteFailed,
    ValidationFailed,
)
from tuck.core.results import (
    TodoAdded,
    TodoListing,
    TodoRestored,
    TodosConverted,
    TodosRemoved,
    TodoUpdated,
)
from tuck.core.roster import TeamRoster, normalize_email
from tuck.core.types import (
    Identity,
    TodoKind,
    TodoRecord,
    local_record_id,
    remote_record_id,
)
from tuck.core.visibility import visible_records
from tuck.gateway.document.abc import DocumentEditor
from tuck.gateway.document.types import DeleteLine, DeleteSpan, InsertLine, TextEdit
from tuck.gateway.identity.abc import IdentityProvider
from tuck.gateway.record_store.abc import RecordLoad, RecordStore
from tuck.gateway.time.abc import Time

logger = logging.getLogger(__name__)


def move_target_error(value: str, line_count: int) -> str | None:
    """Validate a 1-based destination line typed by the user.

    Returns:
        The re-promptable validation message, or None when valid
    """
    message = f"Please enter a valid line number between 1 and {line_count}"
    try:
        target = int(value.strip())
    except ValueError:
        return message
    if target < 1 or target > line_count:
        return message
    return None


@dataclass(frozen=True)
class _Appended:
    """Records as committed by an append, with the load warning it overrode."""

    records: tuple[TodoRecord, ...]
    corrupt: PersistenceCorrupt | None


class TodoEngine:
    """Conversion engine over one project root.

    Collaborators are injected; the engine never touches files, git or the
    terminal directly.
    """

    def __init__(
        self,
        *,
        project_root: Path,
        cwd: Path,
        local_store: RecordStore,
        remote_store: RecordStore,
        identity: IdentityProvider,
        documents: DocumentEditor,
        time: Time,
        cache: ReadCache[RecordLoad],
        roster: TeamRoster,
        locks: ProjectLocks,
    ) -> None:
        self._project_root = project_root
        self._cwd = cwd
        self._stores: dict[TodoKind, RecordStore] = {
            "local": local_store,
            "remote": remote_store,
        }
        self._identity = identity
        self._documents = documents
        self._time = time
        self._cache = cache
        self._roster = roster
        self._locks = locks

    @property
    def project_root(self) -> Path:
        return self._project_root

    @property
    def roster(self) -> TeamRoster:
        return self._roster

    @property
    def documents(self) -> DocumentEditor:
        return self._documents

    def current_identity(self) -> Identity | IdentityUnavailable:
        identity = self._identity.current_identity(self._cwd)
        if identity is None:
            return IdentityUnavailable()
        return identity

    # Reads

    def load(self, kind: TodoKind) -> RecordLoad:
        """Load a store through the read cache."""
        self._cache.cleanup()
        cached = self._cache.get(kind, self._project_root)
        if cached is not None:
            return cached
        loaded = self._stores[kind].load(self._project_root)
        self._cache.set(kind, self._project_root, loaded)
        return loaded

    def list_todos(
        self,
        kind: TodoKind | None,
        *,
        file: str | None = None,
        line: int | None = None,
    ) -> TodoListing | IdentityUnavailable:
        """List local records, visible remote records, or both.

        With kind=None an unavailable identity hides every remote record
        instead of failing.
        """
        viewer: Identity | None = None
        if kind != "local":
            identity = self.current_identity()
            if isinstance(identity, IdentityUnavailable):
                if kind == "remote":
                    return identity
            else:
                viewer = identity

        records: list[TodoRecord] = []
        warnings: list[PersistenceCorrupt] = []
        kinds: tuple[TodoKind, ...] = ("local", "remote") if kind is None else (kind,)
        for each in kinds:
            if each == "remote" and viewer is None:
                continue
            loaded = self.load(each)
            if loaded.corrupt is not None:
                warnings.append(loaded.corrupt)
            candidates = loaded.records
            if each == "remote" and viewer is not None:
                candidates = visible_records(candidates, viewer.email)
            for record in candidates:
                if file is not None and record.file != file:
                    continue
                if line is not None and record.line != line:
                    continue
                records.append(record)

        return TodoListing(records=tuple(records), viewer=viewer, warnings=tuple(warnings))

    def find(
        self, kind: TodoKind, reference: str
    ) -> TodoRecord | NotFound | ValidationFailed | IdentityUnavailable:
        """Find a record by id or by a unique id prefix.

        Remote lookups only see records visible to the current identity.
        """
        listing = self.list_todos(kind)
        if isinstance(listing, IdentityUnavailable):
            return listing

        exact = [r for r in listing.records if r.id == reference]
        if exact:
            return exact[0]
        matches = [r for r in listing.records if r.id.startswith(reference)]
        if not matches:
            return NotFound(message=f"No {kind} TODO with id {reference}")
        if len(matches) > 1:
            return ValidationFailed(
                message=f"Id prefix {reference} is ambiguous ({len(matches)} {kind} TODOs match)"
            )
        return matches[0]

    def scan(self, path: Path) -> tuple[tuple[int, str], ...] | DocumentEditFailed:
        """Return (line index, line text) for every convertible TODO comment line."""
        lines = self._documents.read_lines(path)
        if isinstance(lines, DocumentEditFailed):
            return lines
        return tuple((index, lines[index]) for index in find_todo_comments(lines))

    # Transitions

    def convert(
        self, path: Path, line: int, kind: TodoKind
    ) -> (
        TodosConverted
        | ValidationFailed
        | IdentityUnavailable
        | DocumentEditFailed
        | PersistenceWriteFailed
    ):
        """Convert the TODO comment(s) on one source line into records.

        Args:
            path: Absolute path of the source file
            line: Zero-based line index
            kind: Target store

        Returns:
            TodosConverted on success (source edit failure reported inside),
            otherwise the reason nothing was stored
        """
        author: Identity | None = None
        if kind == "remote":
            identity = self.current_identity()
            if isinstance(identity, IdentityUnavailable):
                return identity
            author = identity

        lines = self._documents.read_lines(path)
        if isinstance(lines, DocumentEditFailed):
            return lines
        if line < 0 or line >= len(lines):
            return ValidationFailed(
                message=f"Line {line + 1} is out of range ({path} has {len(lines)} lines)"
            )

        line_text = lines[line]
        annotations = extract_todos(line_text)
        if not annotations:
            return ValidationFailed(message=f"No TODO message found on line {line + 1}")

        file = str(path)
        now = self._time.now()
        timestamp = now.isoformat()
        millis = int(now.timestamp() * 1000)
        shared_line = len(annotations) > 1

        new_records = []
        for annotation in annotations:
            column = annotation.offset if shared_line else None
            if kind == "remote":
                assert author is not None
                new_records.append(
                    TodoRecord(
                        file=file,
                        line=line,
                        kind="remote",
                        message=annotation.message,
                        id=remote_record_id(file, line, annotation.offset, millis),
                        column=column,
                        author=author,
                        assignees=(author,),
                        created_at=timestamp,
                        updated_at=timestamp,
                    )
                )
            else:
                new_records.append(
                    TodoRecord(
                        file=file,
                        line=line,
                        kind="local",
                        message=annotation.message,
                        id=local_record_id(file, line, annotation.offset),
                        column=column,
                        author=None,
                        assignees=(),
                        created_at=None,
                        updated_at=None,
                    )
                )

        stored = self._append(kind, new_records)
        if isinstance(stored, PersistenceWriteFailed):
            return stored

        edit = _comment_removal(line, line_text)
        edit_failure = None
        if edit is not None:
            edited = self._documents.apply_edits(path, [edit])
            if isinstance(edited, DocumentEditFailed):
                logger.warning("Stored %d TODOs but could not edit %s", len(new_records), path)
                edit_failure = edited

        logger.debug("Converted %d %s TODOs from %s:%d", len(new_records), kind, path, line)
        return TodosConverted(
            records=stored.records,
            source_edit_failure=edit_failure,
            store_warning=stored.corrupt,
        )

    def add_remote(
        self, path: Path, line: int, message: str
    ) -> (
        TodoAdded
        | ValidationFailed
        | IdentityUnavailable
        | DocumentEditFailed
        | PersistenceWriteFailed
    ):
        """Create a remote record at a position without a source comment."""
        identity = self.current_identity()
        if isinstance(identity, IdentityUnavailable):
            return identity

        trimmed = message.strip()
        if not trimmed:
            return ValidationFailed(message="TODO message cannot be empty.")

        lines = self._documents.read_lines(path)
        if isinstance(lines, DocumentEditFailed):
            return lines
        if line < 0 or line >= max(len(lines), 1):
            return ValidationFailed(
                message=f"Line {line + 1} is out of range ({path} has {len(lines)} lines)"
            )

        file = str(path)
        now = self._time.now()
        record = TodoRecord(
            file=file,
            line=line,
            kind="remote",
            message=trimmed,
            id=remote_record_id(file, line, 0, int(now.timestamp() * 1000)),
            column=None,
            author=identity,
            assignees=(identity,),
            created_at=now.isoformat(),
            updated_at=now.isoformat(),
        )
        stored = self._append("remote", [record])
        if isinstance(stored, PersistenceWriteFailed):
            return stored
        return TodoAdded(record=stored.records[0], store_warning=stored.corrupt)

    def restore(
        self, record: TodoRecord
    ) -> TodoRestored | NotFound | ValidationFailed | DocumentEditFailed | PersistenceWriteFailed:
        """Turn a record back into a comment inserted before its stored line.

        The record is removed from its store by (file, line, message).
        """
        path = Path(record.file)
        lines = self._documents.read_lines(path)
        if isinstance(lines, DocumentEditFailed):
            return lines
        if record.line > len(lines):
            return ValidationFailed(
                message=(
                    f"Stored line {record.line + 1} is past the end of {record.file} "
                    f"({len(lines)} lines). Move the TODO first."
                )
            )

        indent = leading_indent(lines[record.line]) if record.line < len(lines) else ""
        prefix = comment_prefix_for(self._documents.language_id(path))
        comment = format_todo_comment(indent, prefix, record.message)

        store = self._stores[record.kind]
        with self._locks.hold(self._project_root):
            try:
                loaded = store.load(self._project_root)
                current = loaded.records
                remaining = tuple(r for r in current if not _same_position(r, record))
                if len(remaining) == len(current):
                    return NotFound(
                        message=f"TODO {record.id} is no longer stored at {record.file}:{record.line + 1}"
                    )

                inserted = self._documents.apply_edits(path, [InsertLine(record.line, comment)])
                if isinstance(inserted, DocumentEditFailed):
                    return inserted

                saved = store.save(self._project_root, remaining, unparsed=loaded.unparsed)
                if isinstance(saved, PersistenceWriteFailed):
                    rollback = self._documents.apply_edits(path, [DeleteLine(record.line)])
                    if isinstance(rollback, DocumentEditFailed):
                        logger.warning("Could not roll back inserted comment in %s", path)
                    return saved
            finally:
                self._cache.clear()

        logger.debug("Restored %s to %s:%d", record.id, path, record.line)
        return TodoRestored(
            record=record,
            comment=comment,
            cursor_line=record.line,
            cursor_column=len(comment),
        )

    def update_message(
        self, kind: TodoKind, record_id: str, new_message: str
    ) -> TodoUpdated | NotFound | ValidationFailed | PersistenceWriteFailed:
        trimmed = new_message.strip()
        if not trimmed:
            return ValidationFailed(message="TODO message cannot be empty.")

        def change(record: TodoRecord) -> TodoRecord | ValidationFailed:
            if record.is_remote and record.message == trimmed:
                return ValidationFailed(message="The new message is the same as the current one.")
            return replace(record, message=trimmed)

        return self._update(kind, record_id, change)

    def move(
        self, kind: TodoKind, record_id: str, destination: int
    ) -> TodoUpdated | NotFound | ValidationFailed | DocumentEditFailed | PersistenceWriteFailed:
        """Move a record to another line.

        Args:
            kind: Store holding the record
            record_id: Record id
            destination: 1-based line number in the record's current file
        """
        found = self._find_stored(kind, record_id)
        if isinstance(found, NotFound):
            return found
        lines = self._documents.read_lines(Path(found.file))
        if isinstance(lines, DocumentEditFailed):
            return lines
        error = move_target_error(str(destination), len(lines))
        if error is not None:
            return ValidationFailed(message=error)

        return self._update(kind, record_id, lambda record: replace(record, line=destination - 1))

    def remove_local(self, file: str, line: int, message: str) -> TodosRemoved | PersistenceWriteFailed:
        """Remove local records matching (file, line, message). No match is a no-op."""
        return self._remove("local", lambda r: r.file == file and r.line == line and r.message == message)

    def remove_remote(self, record_id: str) -> TodosRemoved | PersistenceWriteFailed:
        """Remove the remote record with this id. No match is a no-op."""
        return self._remove("remote", lambda r: r.id == record_id)

    def remove(self, record: TodoRecord) -> TodosRemoved | PersistenceWriteFailed:
        if record.is_remote:
            return self.remove_remote(record.id)
        return self.remove_local(record.file, record.line, record.message)

    def change_assignees(
        self, record_id: str, change: AssigneeChange
    ) -> TodoUpdated | NotFound | ValidationFailed | PersistenceWriteFailed:
        """Add or remove one assignee of a remote record."""

        def apply(record: TodoRecord) -> TodoRecord | ValidationFailed:
            match change:
                case RemoveAssignee(identity=identity):
                    if not record.is_assigned(identity.email):
                        return ValidationFailed(
                            message=f"{identity.email} is not assigned to this TODO."
                        )
                    if len(record.assignees) <= 1:
                        return ValidationFailed(
                            message=(
                                "Cannot remove the last assignee. "
                                "At least one assignee is required."
                            )
                        )
                    remaining = tuple(a for a in record.assignees if a.email != identity.email)
                    return replace(record, assignees=remaining)
                case AddAssignee(identity=identity):
                    normalized = normalize_email(identity.email)
                    if any(normalize_email(a.email) == normalized for a in record.assignees):
                        return ValidationFailed(
                            message="This person is already assigned to this TODO."
                        )
                    return replace(record, assignees=(*record.assignees, identity))

        return self._update("remote", record_id, apply)

    # Internals

    def _append(
        self, kind: TodoKind, new_records: Sequence[TodoRecord]
    ) -> _Appended | PersistenceWriteFailed:
        """Append records, suffixing any id already taken in the store."""
        store = self._stores[kind]
        with self._locks.hold(self._project_root):
            try:
                loaded = store.load(self._project_root)
                stored = _with_unique_ids(new_records, _taken_ids(loaded))
                saved = store.save(
                    self._project_root, (*loaded.records, *stored), unparsed=loaded.unparsed
                )
            finally:
                self._cache.clear()
        if isinstance(saved, PersistenceWriteFailed):
            return saved
        return _Appended(records=stored, corrupt=loaded.corrupt)

    def _find_stored(self, kind: TodoKind, record_id: str) -> TodoRecord | NotFound:
        for record in self.load(kind).records:
            if record.id == record_id:
                return record
        return NotFound(message=f"No {kind} TODO with id {record_id}")

    def _update(
        self,
        kind: TodoKind,
        record_id: str,
        change: Callable[[TodoRecord], TodoRecord | ValidationFailed],
    ) -> TodoUpdated | NotFound | ValidationFailed | PersistenceWriteFailed:
        store = self._stores[kind]
        with self._locks.hold(self._project_root):
            try:
                loaded = store.load(self._project_root)
                current = loaded.records
                index = next((i for i, r in enumerate(current) if r.id == record_id), None)
                if index is None:
                    return NotFound(message=f"No {kind} TODO with id {record_id}")

                before = current[index]
                after = change(before)
                if isinstance(after, ValidationFailed):
                    return after
                if after.is_remote:
                    after = replace(after, updated_at=self._time.now().isoformat())

                updated = (*current[:index], after, *current[index + 1 :])
                saved = store.save(self._project_root, updated, unparsed=loaded.unparsed)
                if isinstance(saved, PersistenceWriteFailed):
                    return saved
            finally:
                self._cache.clear()

        logger.debug("Updated %s TODO %s", kind, record_id)
        return TodoUpdated(before=before, after=after)

    def _remove(
        self, kind: TodoKind, matches: Callable[[TodoRecord], bool]
    ) -> TodosRemoved | PersistenceWriteFailed:
        store = self._stores[kind]
        with self._locks.hold(self._project_root):
            try:
                loaded = store.load(self._project_root)
                current = loaded.records
                removed = tuple(r for r in current if matches(r))
                if not removed:
                    return TodosRemoved(removed=())
                saved = store.save(
                    self._project_root,
                    tuple(r for r in current if not matches(r)),
                    unparsed=loaded.unparsed,
                )
                if isinstance(saved, PersistenceWriteFailed):
                    return saved
            finally:
                self._cache.clear()

        logger.debug("Removed %d %s TODOs", len(removed), kind)
        return TodosRemoved(removed=removed)


def _same_position(record: TodoRecord, target: TodoRecord) -> bool:
    return (
        record.file == target.file
        and record.line == target.line
        and record.message == target.message
    )


def _comment_removal(line: int, line_text: str) -> TextEdit | None:
    """Edit that removes converted TODO text from its source line.

    A comment-only line is deleted with its terminator; otherwise the text
    from the first TODO comment to the end of the line is removed.
    """
    if has_todo_comment(line_text):
        return DeleteLine(line)
    start = comment_start(line_text)
    if start is None:
        return None
    return DeleteSpan(line=line, start=start, end=len(line_text))


def _taken_ids(loaded: RecordLoad) -> set[str]:
    taken = {record.id for record in loaded.records}
    for item in loaded.unparsed:
        if isinstance(item, dict) and isinstance(item.get("id"), str):
            taken.add(item["id"])
    return taken


def _with_unique_ids(records: Sequence[TodoRecord], taken: set[str]) -> tuple[TodoRecord, ...]:
    """Suffix `:<n>` (smallest free n) onto ids already present in the store."""
    used = set(taken)
    unique = []
    for record in records:
        record_id = record.id
        suffix = 1
        while record_id in used:
            record_id = f"{record.id}:{suffix}"
            suffix += 1
        used.add(record_id)
        unique.append(replace(record, id=record_id))
    return tuple(unique)
