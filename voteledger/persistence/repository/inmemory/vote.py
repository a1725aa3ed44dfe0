"""In-memory vote repository for testing."""

from typing import Dict, Optional, Sequence

from voteledger.domain.model import Vote, VoteTally, VoteTransition
from voteledger.domain.repository.vote import VoteRepository
from voteledger.domain.value import (
    ContentId,
    ContentKind,
    ContentRef,
    UserId,
    VoteDirection,
)

_Key = tuple[UserId, ContentRef]


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing.

    Votes are keyed on (voter, target), so the uniqueness invariant holds by
    construction. No method awaits part-way through a write, which makes
    each write atomic with respect to other tasks on the event loop.
    """

    def __init__(self) -> None:
        self._votes: dict[_Key, Vote] = {}
        self.commits = 0

    async def find_by_voter_and_target(
        self, voter_id: UserId, target: ContentRef
    ) -> Optional[Vote]:
        """Find a vote by voter and target."""
        return self._votes.get((voter_id, target))

    async def find_by_voter_and_targets(
        self,
        voter_id: UserId,
        kind: ContentKind,
        content_ids: Sequence[ContentId],
    ) -> list[Vote]:
        """Find a voter's votes on multiple items of one kind."""
        wanted = set(content_ids)
        return [
            v
            for v in self._votes.values()
            if v.voter_id == voter_id
            and v.target.kind == kind
            and v.target.id in wanted
        ]

    async def delete_if_direction(
        self, voter_id: UserId, target: ContentRef, direction: VoteDirection
    ) -> bool:
        """Delete a vote only if it points ``direction``."""
        key = (voter_id, target)
        existing = self._votes.get(key)
        if existing is None or existing.direction != direction:
            return False
        del self._votes[key]
        return True

    async def insert_or_flip(self, vote: Vote) -> Optional[VoteTransition]:
        """Insert a vote or flip an opposite one."""
        key = (vote.voter_id, vote.target)
        existing = self._votes.get(key)
        if existing is None:
            self._votes[key] = vote
            return VoteTransition.CREATED
        if existing.direction == vote.direction:
            return None
        self._votes[key] = existing.flipped(cast_at=vote.cast_at)
        return VoteTransition.FLIPPED

    async def delete_by_voter_and_target(
        self, voter_id: UserId, target: ContentRef
    ) -> bool:
        """Delete a vote whatever its direction."""
        return self._votes.pop((voter_id, target), None) is not None

    async def commit(self) -> None:
        """Writes are applied immediately; only count the commit."""
        self.commits += 1

    async def tally(self, target: ContentRef) -> VoteTally:
        """Count votes on an item."""
        return self._count([v for v in self._votes.values() if v.target == target])

    async def tally_many(
        self, targets: Sequence[ContentRef]
    ) -> Dict[ContentRef, VoteTally]:
        """Count votes on several items."""
        return {target: await self.tally(target) for target in targets}

    def count_rows(self, voter_id: UserId, target: ContentRef) -> int:
        """Number of stored votes for a key (0 or 1)."""
        return sum(
            1
            for v in self._votes.values()
            if v.voter_id == voter_id and v.target == target
        )

    @staticmethod
    def _count(votes: list[Vote]) -> VoteTally:
        return VoteTally(
            upvotes=sum(1 for v in votes if v.direction == VoteDirection.UP),
            downvotes=sum(1 for v in votes if v.direction == VoteDirection.DOWN),
        )
