"""Abstract interface for discovering the current user's identity."""

from abc import ABC, abstractmethod
from pathlib import Path

from tuck.core.types import Identity


class IdentityProvider(ABC):
    """Abstract source of the viewer/author identity."""

    @abstractmethod
    def current_identity(self, cwd: Path) -> Identity | None:
        """Get the identity of the user running tuck.

        Args:
            cwd: Working directory (identity may be repository-specific)

        Returns:
            Identity if both name and email are configured, None otherwise
        """
        ...
