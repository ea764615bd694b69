"""Fake implementation of RecordStore for testing."""

from collections.abc import Sequence
from pathlib import Path
from typing import Any

from tuck.core.non_ideal_state import PersistenceCorrupt, PersistenceWriteFailed
from tuck.core.types import TodoKind, TodoRecord
from tuck.gateway.record_store.abc import RecordLoad, RecordsSaved, RecordStore


class FakeRecordStore(RecordStore):
    """In-memory implementation of RecordStore for testing.

    Constructor Injection: initial records, corruption and write failure are
    configured up front.
    Mutation Tracking: every save and load is recorded for assertions.

    Example:
        >>> store = FakeRecordStore(kind="local", records=[TodoRecord.test()])
        >>> store.save(Path("/repo"), [])
        >>> assert store.saves[0][1] == ()
    """

    def __init__(
        self,
        *,
        kind: TodoKind,
        records: Sequence[TodoRecord] | None = None,
        corrupt: bool = False,
        fail_writes: bool = False,
        unparsed: Sequence[Any] | None = None,
    ) -> None:
        """Create FakeRecordStore with pre-configured state.

        Args:
            kind: Kind of records held
            records: Initial records (shared by every project root)
            corrupt: If True, load reports a corrupt document until the
                first successful save
            fail_writes: If True, every save returns PersistenceWriteFailed
            unparsed: Raw entries the store reports as unreadable
        """
        self._kind: TodoKind = kind
        self._records: tuple[TodoRecord, ...] = tuple(records) if records is not None else ()
        self._corrupt = corrupt
        self._fail_writes = fail_writes
        self._unparsed: tuple[Any, ...] = tuple(unparsed) if unparsed is not None else ()
        self._saves: list[tuple[Path, tuple[TodoRecord, ...]]] = []
        self._load_count = 0

    @property
    def kind(self) -> TodoKind:
        return self._kind

    def load(self, project_root: Path) -> RecordLoad:
        self._load_count += 1
        if self._corrupt:
            return RecordLoad(
                records=(),
                corrupt=PersistenceCorrupt(
                    path=str(project_root / f".{self._kind}todos.json"),
                    message=f"Failed to load {self._kind} TODOs: expected a JSON array",
                ),
            )
        return RecordLoad(records=self._records, corrupt=None, unparsed=self._unparsed)

    def save(
        self,
        project_root: Path,
        records: Sequence[TodoRecord],
        *,
        unparsed: Sequence[Any] = (),
    ) -> RecordsSaved | PersistenceWriteFailed:
        if self._fail_writes:
            return PersistenceWriteFailed(
                path=str(project_root / f".{self._kind}todos.json"),
                message=f"Failed to save {self._kind} TODOs: disk full",
            )
        self._records = tuple(records)
        self._unparsed = tuple(unparsed)
        self._corrupt = False
        self._saves.append((project_root, self._records))
        return RecordsSaved(count=len(self._records))

    @property
    def records(self) -> tuple[TodoRecord, ...]:
        """Read-only access to the current in-memory records."""
        return self._records

    @property
    def unparsed(self) -> tuple[Any, ...]:
        """Read-only access to the raw entries kept by the last save."""
        return self._unparsed

    @property
    def saves(self) -> list[tuple[Path, tuple[TodoRecord, ...]]]:
        """Read-only access to (project_root, records) for each save."""
        return list(self._saves)

    @property
    def load_count(self) -> int:
        """Number of load calls that reached the store."""
        return self._load_count
