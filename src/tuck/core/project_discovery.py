"""Project root discovery."""

from pathlib import Path

from tuck.core.config import CONFIG_DIR_NAME

ROOT_MARKERS = (CONFIG_DIR_NAME, ".git")


def discover_project_root(start: Path) -> Path:
    """Walk up from `start` to the first directory holding `.tuck` or `.git`.

    Falls back to `start` when no marker is found.

    Example:
        >>> discover_project_root(Path("/repo/src/pkg"))  # /repo/.git exists
        PosixPath('/repo')
    """
    for directory in (start, *start.parents):
        if any((directory / marker).exists() for marker in ROOT_MARKERS):
            return directory
    return start
