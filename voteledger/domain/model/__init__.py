"""Domain model entities for the vote ledger."""

from voteledger.domain.model.reputation import ReputationSummary
from voteledger.domain.model.tally import CastResult, VoteTally, VoteTransition
from voteledger.domain.model.vote import Vote

__all__ = [
    "Vote",
    "VoteTally",
    "VoteTransition",
    "CastResult",
    "ReputationSummary",
]
