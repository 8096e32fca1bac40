"""Bootstrap wiring for dinner and collaboration services.

Until real persistence and notification adapters exist, the ports are
backed by the in-memory stubs.
"""

from __future__ import annotations

from convivio.application.ports.collaboration_event_publisher import (
    CollaborationEventPublisherProtocol,
)
from convivio.application.ports.dinner_repository import DinnerRepositoryProtocol
from convivio.application.ports.reminder_notifier import ReminderNotifierProtocol
from convivio.application.ports.time_authority import TimeAuthorityProtocol
from convivio.application.services.collaboration_service import (
    CollaborationService,
)
from convivio.application.services.dinner_service import DinnerService
from convivio.application.services.wine_service_scheduler import (
    WineServiceScheduler,
)
from convivio.config.collaboration_config import CollaborationConfig
from convivio.config.wine_service_config import WineServiceConfig
from convivio.infrastructure.adapters.system_time_authority import (
    SystemTimeAuthority,
)
from convivio.infrastructure.stubs.collaboration_event_publisher_stub import (
    CollaborationEventPublisherStub,
)
from convivio.infrastructure.stubs.dinner_repository_stub import DinnerRepositoryStub
from convivio.infrastructure.stubs.reminder_notifier_stub import ReminderNotifierStub

_dinner_repository: DinnerRepositoryProtocol | None = None
_reminder_notifier: ReminderNotifierProtocol | None = None
_event_publisher: CollaborationEventPublisherProtocol | None = None
_time_authority: TimeAuthorityProtocol | None = None


def get_dinner_repository() -> DinnerRepositoryProtocol:
    """Get dinner repository instance."""
    global _dinner_repository
    if _dinner_repository is None:
        _dinner_repository = DinnerRepositoryStub()
    return _dinner_repository


def get_reminder_notifier() -> ReminderNotifierProtocol:
    """Get reminder notifier instance."""
    global _reminder_notifier
    if _reminder_notifier is None:
        _reminder_notifier = ReminderNotifierStub()
    return _reminder_notifier


def get_event_publisher() -> CollaborationEventPublisherProtocol:
    global _event_publisher
    if _event_publisher is None:
        _event_publisher = CollaborationEventPublisherStub()
    return _event_publisher


def get_time_authority() -> TimeAuthorityProtocol:
    global _time_authority
    if _time_authority is None:
        _time_authority = SystemTimeAuthority()
    return _time_authority


def get_wine_service_scheduler() -> WineServiceScheduler:
    """Build a scheduler with configuration read from the environment."""
    return WineServiceScheduler(
        notifier=get_reminder_notifier(),
        time_authority=get_time_authority(),
        config=WineServiceConfig.from_environment(),
    )


def get_dinner_service() -> DinnerService:
    return DinnerService(
        repository=get_dinner_repository(),
        scheduler=get_wine_service_scheduler(),
        time_authority=get_time_authority(),
    )


def get_collaboration_service() -> CollaborationService:
    return CollaborationService(
        repository=get_dinner_repository(),
        time_authority=get_time_authority(),
        publisher=get_event_publisher(),
        config=CollaborationConfig.from_environment(),
    )


def set_dinner_repository(repository: DinnerRepositoryProtocol) -> None:
    """Set custom dinner repository (for testing)."""
    global _dinner_repository
    _dinner_repository = repository


def set_reminder_notifier(notifier: ReminderNotifierProtocol) -> None:
    """Set custom reminder notifier (for testing)."""
    global _reminder_notifier
    _reminder_notifier = notifier


def set_event_publisher(publisher: CollaborationEventPublisherProtocol) -> None:
    """Set custom collaboration event publisher (for testing)."""
    global _event_publisher
    _event_publisher = publisher


def set_time_authority(time_authority: TimeAuthorityProtocol) -> None:
    """Set custom time authority (for testing)."""
    global _time_authority
    _time_authority = time_authority


def reset_dinner_dependencies() -> None:
    """Reset all singletons (for testing)."""
    global _dinner_repository, _reminder_notifier, _event_publisher, _time_authority
    _dinner_repository = None
    _reminder_notifier = None
    _event_publisher = None
    _time_authority = None
