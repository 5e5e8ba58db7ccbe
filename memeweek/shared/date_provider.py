"""Date provider abstraction for testable clock access.

The contest window is computed from "now", so every caller reads the
clock through a DateProvider. Production code uses real UTC time; tests
swap in a MockDateProvider pinned to a known instant.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone
from typing import Optional


class DateProvider(ABC):
    """Abstract interface for reading the current time."""

    @abstractmethod
    def utcnow(self) -> datetime:
        """Get the current datetime in UTC.

        Returns:
            datetime: Current UTC datetime with timezone info
        """
        pass


class UTCDateProvider(DateProvider):
    """Production implementation of DateProvider using the system clock."""

    def utcnow(self) -> datetime:
        return datetime.now(timezone.utc)


class MockDateProvider(DateProvider):
    """Test implementation of DateProvider for controlled testing.

    This implementation allows tests to control the current time,
    enabling deterministic testing of the weekly contest boundary.
    """

    def __init__(self, fixed_datetime: Optional[datetime] = None):
        """Initialize with an optional fixed instant.

        Args:
            fixed_datetime: Instant returned from utcnow(), defaults to
                2024-01-10 17:00 UTC (a Wednesday, mid contest week)
        """
        self._fixed_datetime = datetime(2024, 1, 10, 17, 0, tzinfo=timezone.utc)
        if fixed_datetime is not None:
            self.set_datetime(fixed_datetime)

    def utcnow(self) -> datetime:
        return self._fixed_datetime

    def set_datetime(self, new_datetime: datetime) -> None:
        """Update the fixed instant.

        Naive datetimes are taken to be UTC.

        Args:
            new_datetime: New datetime to return from utcnow()
        """
        if new_datetime.tzinfo is None:
            new_datetime = new_datetime.replace(tzinfo=timezone.utc)
        self._fixed_datetime = new_datetime.astimezone(timezone.utc)

    def advance(self, delta: timedelta) -> None:
        """Move the fixed instant forward (or backward for negative deltas)."""
        self._fixed_datetime = self._fixed_datetime + delta


# Global date provider instance
_date_provider: DateProvider = UTCDateProvider()


def get_date_provider() -> DateProvider:
    """Get the current date provider instance.

    Returns:
        DateProvider: Current date provider (production or test)
    """
    return _date_provider


def set_date_provider(provider: DateProvider) -> None:
    """Set the date provider instance (mainly for testing).

    Args:
        provider: Date provider implementation to use
    """
    global _date_provider
    _date_provider = provider


def reset_date_provider() -> None:
    """Reset to the default production date provider."""
    global _date_provider
    _date_provider = UTCDateProvider()
