"""JSON-file implementation of RecordStore."""

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from tuck.core.json_format import record_to_json, records_from_json
from tuck.core.non_ideal_state import PersistenceCorrupt, PersistenceWriteFailed
from tuck.core.types import TodoKind, TodoRecord
from tuck.gateway.json_document import read_json_array, write_json_array
from tuck.gateway.record_store.abc import RecordLoad, RecordsSaved, RecordStore

logger = logging.getLogger(__name__)


class JsonRecordStore(RecordStore):
    """Production implementation - one JSON array document per project root.

    This is the only implementation that reads or writes the record
    documents. All other code reaches them through the engine.
    """

    def __init__(self, *, kind: TodoKind, filename: str) -> None:
        """Create a store for one record kind.

        Args:
            kind: "local" or "remote"
            filename: Document name relative to the project root
                (e.g., ".localtodos.json")
        """
        self._kind: TodoKind = kind
        self._filename = filename

    @property
    def kind(self) -> TodoKind:
        return self._kind

    def document_path(self, project_root: Path) -> Path:
        return project_root / self._filename

    def load(self, project_root: Path) -> RecordLoad:
        path = self.document_path(project_root)
        items = read_json_array(path)
        if isinstance(items, PersistenceCorrupt):
            logger.warning("%s", items.message)
            return RecordLoad(records=(), corrupt=items)

        records, unparsed = records_from_json(items, self._kind)
        logger.debug("Loaded %d %s TODOs from %s", len(records), self._kind, path)
        return RecordLoad(records=records, corrupt=None, unparsed=unparsed)

    def save(
        self,
        project_root: Path,
        records: Sequence[TodoRecord],
        *,
        unparsed: Sequence[Any] = (),
    ) -> RecordsSaved | PersistenceWriteFailed:
        path = self.document_path(project_root)
        failure = write_json_array(path, [*(record_to_json(r) for r in records), *unparsed])
        if failure is not None:
            logger.warning("%s", failure.message)
            return failure
        return RecordsSaved(count=len(records))
