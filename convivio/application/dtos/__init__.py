"""Data transfer objects for the application layer."""

from convivio.application.dtos.dinner_document import (
    CommentDocument,
    ConfirmedWineDocument,
    DinnerDocument,
    ProposalDocument,
    VoteDocument,
    WinePairingDocument,
)

__all__ = [
    "CommentDocument",
    "ConfirmedWineDocument",
    "DinnerDocument",
    "ProposalDocument",
    "VoteDocument",
    "WinePairingDocument",
]
