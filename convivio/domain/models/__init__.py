"""Domain models for Convivio.

Contains the dinner aggregate, its state machines and the value objects
for proposals, votes, comments and wines. These models contain no
infrastructure dependencies.
"""

from convivio.domain.models.dinner_event import DinnerEvent
from convivio.domain.models.dinner_status import CollaborationState, DinnerStatus
from convivio.domain.models.participant import ParticipantRole, RoleCapabilities
from convivio.domain.models.proposal import (
    Comment,
    CourseType,
    Proposal,
    ProposalStatus,
    Vote,
    VoteOutcome,
)
from convivio.domain.models.temperature import TemperatureCategory, WineType
from convivio.domain.models.voting_ledger import VotingLedger
from convivio.domain.models.wine import ConfirmedWine, WinePairing, WineSource

__all__: list[str] = [
    "CollaborationState",
    "Comment",
    "ConfirmedWine",
    "CourseType",
    "DinnerEvent",
    "DinnerStatus",
    "ParticipantRole",
    "Proposal",
    "ProposalStatus",
    "RoleCapabilities",
    "TemperatureCategory",
    "Vote",
    "VoteOutcome",
    "VotingLedger",
    "WinePairing",
    "WineSource",
    "WineType",
]
