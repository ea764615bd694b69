"""Fake identity provider for testing."""

from pathlib import Path

from tuck.core.types import Identity
from tuck.gateway.identity.abc import IdentityProvider


class FakeIdentityProvider(IdentityProvider):
    """Returns the identity configured at construction time.

    This class has NO public setup methods. All state is provided via constructor.
    """

    def __init__(self, identity: Identity | None) -> None:
        """Create FakeIdentityProvider.

        Args:
            identity: Identity to report, or None to simulate unconfigured git
        """
        self._identity = identity
        self._lookups: list[Path] = []

    def current_identity(self, cwd: Path) -> Identity | None:
        self._lookups.append(cwd)
        return self._identity

    @property
    def lookups(self) -> list[Path]:
        """Read-only access to the cwd of each lookup."""
        return list(self._lookups)
