"""Fake clock for testing."""

from datetime import UTC, datetime, timedelta

from tuck.gateway.time.abc import Time


class FakeTime(Time):
    """Clock that only moves when told to.

    Example:
        >>> time = FakeTime(datetime(2024, 1, 15, 10, 30, tzinfo=UTC))
        >>> time.advance(seconds=3)
    """

    def __init__(self, current: datetime | None = None) -> None:
        """Create FakeTime frozen at `current` (defaults to 2024-01-15 10:30 UTC)."""
        self._current = current if current is not None else datetime(2024, 1, 15, 10, 30, tzinfo=UTC)

    def now(self) -> datetime:
        return self._current

    def advance(self, *, seconds: float) -> None:
        """Move the clock forward."""
        self._current = self._current + timedelta(seconds=seconds)
