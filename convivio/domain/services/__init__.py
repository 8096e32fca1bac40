"""Domain services for Convivio.

Domain services contain business logic that doesn't naturally fit in the
dinner aggregate or its value objects. They must NOT depend on
infrastructure.

Available services:
- DinnerLifecycle: Guarded dinner and collaboration state transitions
- capabilities_for: Role to capability lookup
- plan_wine_service: Cooling schedule for confirmed wines
- KeywordTemperatureSuggester: Default temperature category from a wine name
"""

from convivio.domain.services.dinner_lifecycle import DinnerLifecycle
from convivio.domain.services.role_authority import (
    ROLE_CAPABILITIES,
    capabilities_for,
)
from convivio.domain.services.temperature_suggester import (
    KeywordTemperatureSuggester,
    suggest_for_wine_type,
)
from convivio.domain.services.wine_service_plan import (
    format_schedule_summary,
    plan_wine_service,
    post_event_time,
)

__all__ = [
    "DinnerLifecycle",
    "KeywordTemperatureSuggester",
    "ROLE_CAPABILITIES",
    "capabilities_for",
    "format_schedule_summary",
    "plan_wine_service",
    "post_event_time",
    "suggest_for_wine_type",
]
