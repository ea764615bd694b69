"""Abstract interface for team roster persistence."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from tuck.core.non_ideal_state import PersistenceCorrupt, PersistenceWriteFailed
from tuck.core.types import Identity


@dataclass(frozen=True)
class TeamLoad:
    """Result of loading the roster document.

    Attributes:
        members: Members in insertion order
        corrupt: Warning-level outcome when the document failed to parse
    """

    members: tuple[Identity, ...]
    corrupt: PersistenceCorrupt | None


class TeamStore(ABC):
    """Flat list of team members, per project root.

    Implementations:
    - JsonTeamStore: Production - JSON array document in the project root
    - FakeTeamStore: Testing - in-memory
    """

    @abstractmethod
    def load(self, project_root: Path) -> TeamLoad:
        """Load the roster; never raises for missing or corrupt documents."""
        ...

    @abstractmethod
    def save(
        self, project_root: Path, members: Sequence[Identity]
    ) -> PersistenceWriteFailed | None:
        """Replace the roster.

        Returns:
            None on success, PersistenceWriteFailed otherwise
        """
        ...
