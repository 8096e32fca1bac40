"""Test helpers for Convivio tests.

Helpers:
    FakeTimeAuthority: Controllable time authority for deterministic tests
    make_dinner: Dinner factory with sensible defaults

Usage:
    from tests.helpers import FakeTimeAuthority, make_dinner
"""

from tests.helpers.dinner_factory import (
    DINNER_AT,
    make_confirmed_wine,
    make_dinner,
    make_pairing,
)
from tests.helpers.fake_time_authority import FakeTimeAuthority

__all__ = [
    "DINNER_AT",
    "FakeTimeAuthority",
    "make_confirmed_wine",
    "make_dinner",
    "make_pairing",
]
