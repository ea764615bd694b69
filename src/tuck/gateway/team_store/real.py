"""JSON-file implementation of TeamStore."""

import logging
from collections.abc import Sequence
from pathlib import Path

from tuck.core.json_format import identity_from_json, identity_to_json
from tuck.core.non_ideal_state import PersistenceCorrupt, PersistenceWriteFailed
from tuck.core.types import Identity
from tuck.gateway.json_document import read_json_array, write_json_array
from tuck.gateway.team_store.abc import TeamLoad, TeamStore

logger = logging.getLogger(__name__)


class JsonTeamStore(TeamStore):
    """Production implementation - `[{"name": ..., "email": ...}, ...]`."""

    def __init__(self, *, filename: str) -> None:
        self._filename = filename

    def document_path(self, project_root: Path) -> Path:
        return project_root / self._filename

    def load(self, project_root: Path) -> TeamLoad:
        items = read_json_array(self.document_path(project_root))
        if isinstance(items, PersistenceCorrupt):
            logger.warning("%s", items.message)
            return TeamLoad(members=(), corrupt=items)

        members: list[Identity] = []
        for index, item in enumerate(items):
            member = identity_from_json(item)
            if member is None:
                logger.warning("Skipping malformed team member at index %d", index)
                continue
            members.append(member)
        return TeamLoad(members=tuple(members), corrupt=None)

    def save(
        self, project_root: Path, members: Sequence[Identity]
    ) -> PersistenceWriteFailed | None:
        failure = write_json_array(
            self.document_path(project_root), [identity_to_json(m) for m in members]
        )
        if failure is not None:
            logger.warning("%s", failure.message)
        return failure
