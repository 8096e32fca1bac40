"""
Domain events for Convivio.

Events that represent significant changes in a shared dinner's
collaborative activity. All events are immutable and timestamped.
"""

from convivio.domain.events.collaboration import (
    COLLABORATION_STATE_CHANGED_EVENT_TYPE,
    COMMENT_ADDED_EVENT_TYPE,
    PROPOSAL_SUBMITTED_EVENT_TYPE,
    VOTE_CAST_EVENT_TYPE,
    CollaborationEvent,
    CollaborationStateChangedEvent,
    CommentAddedEvent,
    ProposalSubmittedEvent,
    VoteCastEvent,
)

__all__: list[str] = [
    "COLLABORATION_STATE_CHANGED_EVENT_TYPE",
    "COMMENT_ADDED_EVENT_TYPE",
    "PROPOSAL_SUBMITTED_EVENT_TYPE",
    "VOTE_CAST_EVENT_TYPE",
    "CollaborationEvent",
    "CollaborationStateChangedEvent",
    "CommentAddedEvent",
    "ProposalSubmittedEvent",
    "VoteCastEvent",
]
