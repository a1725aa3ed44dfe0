"""Vote tallies and cast outcomes."""

from enum import Enum

from pydantic import computed_field

from voteledger.domain.model.common import DomainModel
from voteledger.domain.value import VoteDirection


class VoteTally(DomainModel):
    """Aggregate counts for one item, computed on read."""

    upvotes: int = 0
    downvotes: int = 0

    @computed_field  # type: ignore[prop-decorator]
    @property
    def score(self) -> int:
        """Net score, always upvotes minus downvotes."""
        return self.upvotes - self.downvotes

    def __add__(self, other: "VoteTally") -> "VoteTally":
        return VoteTally(
            upvotes=self.upvotes + other.upvotes,
            downvotes=self.downvotes + other.downvotes,
        )


class VoteTransition(str, Enum):
    """Which write a cast performed: exactly one of these."""

    CREATED = "created"
    FLIPPED = "flipped"
    RETRACTED = "retracted"


class CastResult(DomainModel):
    """Outcome of a cast: fresh tally plus the caller's resulting direction."""

    tally: VoteTally
    user_direction: VoteDirection
    transition: VoteTransition
