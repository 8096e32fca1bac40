"""System clock implementation of TimeAuthorityProtocol.

Production source of the current time for the services, which pass it to
every lifecycle, ledger and scheduling call they make.
"""

from __future__ import annotations

import time
from datetime import datetime, timezone

from convivio.application.ports.time_authority import TimeAuthorityProtocol


class SystemTimeAuthority(TimeAuthorityProtocol):
    """Time authority backed by the host clock."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)

    def utcnow(self) -> datetime:
        return datetime.now(timezone.utc)

    def monotonic(self) -> float:
        return time.monotonic()
