"""Abstract clock for dependency injection."""

from abc import ABC, abstractmethod
from datetime import datetime


class Time(ABC):
    """Abstract time operations.

    Timestamps on remote records and read-cache expiry both go through
    this interface so tests can control the clock.
    """

    @abstractmethod
    def now(self) -> datetime:
        """Get the current time as a timezone-aware UTC datetime."""
        ...
