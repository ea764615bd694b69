"""Short-lived read cache in front of record store loads.

Absorbs bursts of reads (e.g., a listing followed by a lookup). Constructed
once per running instance and injected into the engine; every mutating
engine operation clears it before returning.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from pathlib import Path
from typing import Generic, TypeVar

from tuck.gateway.time.abc import Time

T = TypeVar("T")

DEFAULT_TTL_SECONDS = 2.0


@dataclass(frozen=True)
class _CacheEntry(Generic[T]):
    data: T
    stored_at: datetime


class ReadCache(Generic[T]):
    """TTL cache keyed by (store kind, project root)."""

    def __init__(self, time: Time, *, ttl_seconds: float = DEFAULT_TTL_SECONDS) -> None:
        self._time = time
        self._ttl = timedelta(seconds=ttl_seconds)
        self._entries: dict[tuple[str, Path], _CacheEntry[T]] = {}

    def get(self, kind: str, project_root: Path) -> T | None:
        key = (kind, project_root)
        entry = self._entries.get(key)
        if entry is None:
            return None
        if self._time.now() - entry.stored_at > self._ttl:
            del self._entries[key]
            return None
        return entry.data

    def set(self, kind: str, project_root: Path, data: T) -> None:
        self._entries[(kind, project_root)] = _CacheEntry(data=data, stored_at=self._time.now())

    def clear(self) -> None:
        self._entries.clear()

    def cleanup(self) -> None:
        """Drop expired entries."""
        now = self._time.now()
        expired = [key for key, entry in self._entries.items() if now - entry.stored_at > self._ttl]
        for key in expired:
            del self._entries[key]

    def __len__(self) -> int:
        return len(self._entries)
