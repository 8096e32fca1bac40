"""
Pytest configuration and shared fixtures for Convivio tests.

Testing Standards:
- Async tests run under pytest-asyncio (auto mode enabled in pyproject.toml)
- Unit tests go in tests/unit/
- Integration tests go in tests/integration/
- Time-dependent tests use FakeTimeAuthority, never the wall clock
"""

import pytest

from convivio.config.collaboration_config import TEST_COLLABORATION_CONFIG
from convivio.config.wine_service_config import WineServiceConfig
from convivio.infrastructure.stubs import (
    CollaborationEventPublisherStub,
    DinnerRepositoryStub,
    ReminderNotifierStub,
)
from tests.helpers import FakeTimeAuthority


@pytest.fixture
def fake_time_authority() -> FakeTimeAuthority:
    """Time frozen at 09:00 UTC on the day of the test dinners."""
    return FakeTimeAuthority()


@pytest.fixture
def notifier() -> ReminderNotifierStub:
    return ReminderNotifierStub()


@pytest.fixture
def repository() -> DinnerRepositoryStub:
    return DinnerRepositoryStub()


@pytest.fixture
def publisher() -> CollaborationEventPublisherStub:
    return CollaborationEventPublisherStub()


@pytest.fixture
def wine_service_config() -> WineServiceConfig:
    return WineServiceConfig()


@pytest.fixture
def collaboration_config():
    return TEST_COLLABORATION_CONFIG
