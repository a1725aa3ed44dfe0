"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import Dict, Optional, Sequence

from voteledger.domain.model import Vote, VoteTally, VoteTransition
from voteledger.domain.value import (
    ContentId,
    ContentKind,
    ContentRef,
    UserId,
    VoteDirection,
)


class VoteRepository(ABC):
    """Repository for Vote entity.

    Write methods are single conditional statements keyed on the
    (voter, kind, id) uniqueness constraint. None of them reads first and
    writes later, so callers can compose them without a lost update.
    """

    @abstractmethod
    async def find_by_voter_and_target(
        self, voter_id: UserId, target: ContentRef
    ) -> Optional[Vote]:
        """Find a user's vote on a specific item.

        Args:
            voter_id: The voter's ID
            target: The item voted on

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_voter_and_targets(
        self,
        voter_id: UserId,
        kind: ContentKind,
        content_ids: Sequence[ContentId],
    ) -> list[Vote]:
        """Find a user's votes on multiple items of one kind (batch query).

        Args:
            voter_id: The voter's ID
            kind: Kind of the items
            content_ids: IDs of the items to check

        Returns:
            Votes by the user on the specified items
        """
        pass

    @abstractmethod
    async def delete_if_direction(
        self, voter_id: UserId, target: ContentRef, direction: VoteDirection
    ) -> bool:
        """Delete the voter's vote only if it currently points ``direction``.

        Args:
            voter_id: The voter's ID
            target: The item voted on
            direction: Direction the stored vote must have

        Returns:
            True if a vote was deleted
        """
        pass

    @abstractmethod
    async def insert_or_flip(self, vote: Vote) -> Optional[VoteTransition]:
        """Insert the vote, or flip an existing opposite vote to its direction.

        An existing vote that already points the same way is left alone.

        Args:
            vote: The vote to store

        Returns:
            CREATED if a row was inserted, FLIPPED if an existing row changed
            direction, None if the stored vote already had this direction
        """
        pass

    @abstractmethod
    async def delete_by_voter_and_target(
        self, voter_id: UserId, target: ContentRef
    ) -> bool:
        """Delete the voter's vote on an item, whatever its direction.

        Args:
            voter_id: The voter's ID
            target: The item voted on

        Returns:
            True if a vote was deleted, False if no vote existed
        """
        pass

    @abstractmethod
    async def tally(self, target: ContentRef) -> VoteTally:
        """Count up and down votes on an item.

        Args:
            target: The item

        Returns:
            Tally, all zeros when nobody voted
        """
        pass

    @abstractmethod
    async def tally_many(
        self, targets: Sequence[ContentRef]
    ) -> Dict[ContentRef, VoteTally]:
        """Count votes on several items at once.

        Args:
            targets: The items

        Returns:
            Tally per item; items without votes map to a zero tally
        """
        pass

    @abstractmethod
    async def commit(self) -> None:
        """Make the writes performed so far durable.

        Called before a write is reported to the caller, so a failed commit
        surfaces as an error instead of a success for a lost write.

        Raises:
            SQLAlchemyError: If the storage backend rejects the commit
        """
        pass
