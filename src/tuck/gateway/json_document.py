"""Read and write JSON array documents on disk.

Shared by the record and team stores. A missing document reads as an
empty array; a document that is not valid JSON or not an array is
reported as PersistenceCorrupt. Writes go to a temporary sibling file that
is renamed over the target, so readers never observe a partial write.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from tuck.core.non_ideal_state import PersistenceCorrupt, PersistenceWriteFailed

logger = logging.getLogger(__name__)


def read_json_array(path: Path) -> list[Any] | PersistenceCorrupt:
    """Read a JSON array document.

    Args:
        path: Document path

    Returns:
        The array (empty if the file does not exist), or PersistenceCorrupt
    """
    if not path.exists():
        logger.debug("No document at %s, treating as empty", path)
        return []

    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        return PersistenceCorrupt(path=str(path), message=f"Failed to read {path}: {e}")

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        return PersistenceCorrupt(path=str(path), message=f"Failed to parse {path}: {e}")

    if not isinstance(data, list):
        return PersistenceCorrupt(
            path=str(path),
            message=f"Failed to load {path}: expected a JSON array, got {type(data).__name__}",
        )
    return data


def write_json_array(path: Path, items: list[Any]) -> PersistenceWriteFailed | None:
    """Replace a JSON array document atomically.

    Args:
        path: Document path
        items: JSON-serializable array elements

    Returns:
        None on success, PersistenceWriteFailed otherwise
    """
    content = json.dumps(items, indent=2, ensure_ascii=False) + "\n"
    tmp_name: str | None = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
        os.replace(tmp_name, path)
    except OSError as e:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        return PersistenceWriteFailed(path=str(path), message=f"Failed to save {path}: {e}")

    logger.debug("Wrote %d entries to %s", len(items), path)
    return None
