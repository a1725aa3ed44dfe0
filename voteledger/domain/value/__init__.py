"""Domain value objects for the vote ledger."""

from voteledger.domain.value.identifiers import ContentId, UserId, VoteId
from voteledger.domain.value.types import ContentKind, ContentRef, VoteDirection

__all__ = [
    # Identifiers
    "UserId",
    "VoteId",
    "ContentId",
    # Types
    "ContentKind",
    "ContentRef",
    "VoteDirection",
]
