"""Per-project-root mutual exclusion around load-modify-save."""

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path


class ProjectLocks:
    """Process-scoped locks, one per resolved project root.

    Callers across processes are not serialized; tuck assumes one writer
    per project root at a time.
    """

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: dict[Path, threading.Lock] = {}

    @contextmanager
    def hold(self, project_root: Path) -> Iterator[None]:
        with self._guard:
            lock = self._locks.setdefault(project_root, threading.Lock())
        with lock:
            yield
