"""Fake implementation of TeamStore for testing."""

from collections.abc import Sequence
from pathlib import Path

from tuck.core.non_ideal_state import PersistenceWriteFailed
from tuck.core.types import Identity
from tuck.gateway.team_store.abc import TeamLoad, TeamStore


class FakeTeamStore(TeamStore):
    """In-memory roster with save tracking."""

    def __init__(
        self,
        *,
        members: Sequence[Identity] | None = None,
        fail_writes: bool = False,
    ) -> None:
        self._members: tuple[Identity, ...] = tuple(members) if members is not None else ()
        self._fail_writes = fail_writes
        self._saves: list[tuple[Identity, ...]] = []

    def load(self, project_root: Path) -> TeamLoad:
        return TeamLoad(members=self._members, corrupt=None)

    def save(
        self, project_root: Path, members: Sequence[Identity]
    ) -> PersistenceWriteFailed | None:
        if self._fail_writes:
            return PersistenceWriteFailed(
                path=str(project_root / ".todoteam.json"),
                message="Failed to save team members: disk full",
            )
        self._members = tuple(members)
        self._saves.append(self._members)
        return None

    @property
    def members(self) -> tuple[Identity, ...]:
        """Read-only access to the current roster."""
        return self._members

    @property
    def saves(self) -> list[tuple[Identity, ...]]:
        """Read-only access to every saved roster."""
        return list(self._saves)
