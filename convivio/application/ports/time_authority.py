"""Time Authority Protocol - interface for consistent timestamp provisioning.

All services that need timestamps inject a TimeAuthorityProtocol
implementation instead of calling datetime.now() directly. Tests inject
FakeTimeAuthority for deterministic scheduling and vote/comment stamps.
"""

from abc import ABC, abstractmethod
from datetime import datetime


class TimeAuthorityProtocol(ABC):
    """Abstract interface for time authority.

    Example usage:
        class MyService:
            def __init__(self, time_authority: TimeAuthorityProtocol) -> None:
                self._time = time_authority

            def process(self) -> None:
                now = self._time.now()  # NOT datetime.now()

    For production:
        Use SystemTimeAuthority from convivio.infrastructure.adapters

    For testing:
        Use FakeTimeAuthority from tests/helpers/fake_time_authority.py
    """

    @abstractmethod
    def now(self) -> datetime:
        """Return current time with timezone awareness.

        Note:
            Implementations should return timezone-aware datetimes.
        """
        ...

    @abstractmethod
    def utcnow(self) -> datetime:
        """Return current UTC time (timezone-aware)."""
        ...

    @abstractmethod
    def monotonic(self) -> float:
        """Return monotonic clock value for measuring elapsed time.

        Note:
            Only differences between values are meaningful.
        """
        ...
