"""PostgreSQL repository implementations."""

from voteledger.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresVoteRepository",
]
