"""Identity from git configuration."""

import logging
import subprocess
from pathlib import Path

from tuck.core.types import Identity
from tuck.gateway.identity.abc import IdentityProvider

logger = logging.getLogger(__name__)


class GitConfigIdentityProvider(IdentityProvider):
    """Reads `git config user.name` and `git config user.email`."""

    def current_identity(self, cwd: Path) -> Identity | None:
        name = self._config_value(cwd, "user.name")
        email = self._config_value(cwd, "user.email")
        if name is None or email is None:
            logger.debug("git user.name/user.email not configured in %s", cwd)
            return None
        return Identity(name=name, email=email)

    def _config_value(self, cwd: Path, key: str) -> str | None:
        try:
            result = subprocess.run(
                ["git", "config", key],
                cwd=cwd,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as e:
            # git not installed
            logger.debug("Failed to run git config %s: %s", key, e)
            return None
        if result.returncode != 0:
            return None
        value = result.stdout.strip()
        return value if value else None
