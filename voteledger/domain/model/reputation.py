"""Reputation derived from votes received."""

from voteledger.domain.model.common import DomainModel


class ReputationSummary(DomainModel):
    """Votes a user has received across the content they own.

    Never stored; recomputed from the ledger on every read.
    """

    upvotes_received: int
    downvotes_received: int
    net_score: int
    temperature: float
