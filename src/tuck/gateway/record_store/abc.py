"""Abstract interface for TODO record persistence."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from tuck.core.non_ideal_state import PersistenceCorrupt, PersistenceWriteFailed
from tuck.core.types import TodoKind, TodoRecord


@dataclass(frozen=True)
class RecordLoad:
    """Result of loading one store.

    Attributes:
        records: Loaded records in persisted order (empty when the document
            is missing or corrupt)
        corrupt: Warning-level outcome when the document failed to parse
        unparsed: Raw array entries that could not be read as records; they
            are written back unchanged by the next save
    """

    records: tuple[TodoRecord, ...]
    corrupt: PersistenceCorrupt | None
    unparsed: tuple[Any, ...] = ()


@dataclass(frozen=True)
class RecordsSaved:
    """Success result from saving a store."""

    count: int


class RecordStore(ABC):
    """Ordered collection of TODO records of one kind, per project root.

    The store neither deduplicates nor validates; callers read, modify and
    write the whole collection. Entries it cannot read are handed back as
    `unparsed` so a save never drops them. Callers serialize access per project root.

    Implementations:
    - JsonRecordStore: Production - JSON array document in the project root
    - FakeRecordStore: Testing - in-memory, never touches disk
    """

    @property
    @abstractmethod
    def kind(self) -> TodoKind:
        """Kind of records held by this store."""
        ...

    @abstractmethod
    def load(self, project_root: Path) -> RecordLoad:
        """Load all records for a project.

        Never raises for missing or corrupt documents.

        Args:
            project_root: Project root directory

        Returns:
            RecordLoad with records and an optional corruption warning
        """
        ...

    @abstractmethod
    def save(
        self,
        project_root: Path,
        records: Sequence[TodoRecord],
        *,
        unparsed: Sequence[Any] = (),
    ) -> RecordsSaved | PersistenceWriteFailed:
        """Replace the entire persisted collection.

        Args:
            project_root: Project root directory
            records: Complete new collection
            unparsed: Raw entries from the last load, persisted after the
                records as they were read

        Returns:
            RecordsSaved, or PersistenceWriteFailed if nothing was committed
        """
        ...
