"""End-to-end dinner flow through the bootstrap wiring.

Services come from ``convivio.bootstrap.dinner`` with the in-memory stubs
and a frozen clock, then a shared dinner goes from menu collaboration to
wine service and completion.
"""

from collections.abc import Iterator
from datetime import timedelta

import pytest

from convivio.bootstrap.dinner import (
    get_collaboration_service,
    get_dinner_repository,
    get_dinner_service,
    get_event_publisher,
    get_reminder_notifier,
    get_time_authority,
    reset_dinner_dependencies,
    set_time_authority,
)
from convivio.domain.errors.lifecycle import LifecycleViolationError
from convivio.domain.events import ProposalSubmittedEvent, VoteCastEvent
from convivio.domain.models.dinner_status import CollaborationState, DinnerStatus
from convivio.domain.models.proposal import CourseType, ProposalStatus
from convivio.domain.models.service_plan import ReminderKind
from convivio.infrastructure.adapters import SystemTimeAuthority
from tests.helpers import DINNER_AT, FakeTimeAuthority, make_pairing

pytestmark = pytest.mark.integration


@pytest.fixture(autouse=True)
def wiring(fake_time_authority: FakeTimeAuthority) -> Iterator[FakeTimeAuthority]:
    reset_dinner_dependencies()
    set_time_authority(fake_time_authority)
    yield fake_time_authority
    reset_dinner_dependencies()


async def test_shared_dinner_from_proposals_to_completion(
    wiring: FakeTimeAuthority,
) -> None:
    dinners = get_dinner_service()
    collaboration = get_collaboration_service()

    dinner = await dinners.create_dinner(
        "Cena d'estate",
        DINNER_AT,
        guest_count=4,
        wine_pairings=[
            make_pairing("Franciacorta Brut"),
            make_pairing("Verdicchio Riserva", course="primo", producer="Bucci"),
        ],
        shared=True,
    )

    risotto = await collaboration.submit_proposal(
        dinner.id, "u-1", "Marco", "member", CourseType.FIRST_COURSE, "Risotto"
    )
    await collaboration.cast_vote(dinner.id, risotto.id, "u-2", "Anna", "guest", True)
    await collaboration.add_comment(
        dinner.id, risotto.id, "u-2", "Anna", "guest", "Con lo zafferano!"
    )
    await collaboration.change_collaboration_state(
        dinner.id, "u-0", "owner", CollaborationState.LOCKED
    )
    await collaboration.set_proposal_status(
        dinner.id, risotto.id, "u-0", "owner", ProposalStatus.ACCEPTED
    )

    await dinners.confirm_wines(dinner.id)
    await dinners.confirm_dinner(dinner.id)
    plan = await dinners.schedule_wine_service(dinner.id)

    notifier = get_reminder_notifier()
    kinds = sorted(r.payload.kind.value for r in notifier.pending.values())
    assert plan.tokens_issued == 4
    assert kinds == [
        ReminderKind.POST_EVENT.value,
        ReminderKind.PUT_IN_COOLING.value,
        ReminderKind.PUT_IN_COOLING.value,
        ReminderKind.REMOVE_FROM_COOLING.value,
    ]

    with pytest.raises(LifecycleViolationError):
        await collaboration.cast_vote(
            dinner.id, risotto.id, "u-3", "Luca", "member", False
        )

    wiring.set_time(DINNER_AT + timedelta(hours=5))
    assert await dinners.needs_bottle_unload(dinner.id)

    completed = await dinners.complete_dinner(dinner.id)

    assert completed.status is DinnerStatus.COMPLETED
    assert notifier.pending == {}
    assert not await dinners.needs_bottle_unload(dinner.id)
    stored = await get_dinner_repository().get(dinner.id)
    assert stored.ledger.get_proposal(risotto.id).status is ProposalStatus.ACCEPTED
    assert stored.ledger.score(risotto.id) == 1

    publisher = get_event_publisher()
    assert len(publisher.events_of(ProposalSubmittedEvent)) == 1
    assert len(publisher.events_of(VoteCastEvent)) == 1


async def test_reset_rebuilds_singletons() -> None:
    repository = get_dinner_repository()
    assert get_dinner_repository() is repository

    reset_dinner_dependencies()

    assert get_dinner_repository() is not repository
    assert isinstance(get_time_authority(), SystemTimeAuthority)
