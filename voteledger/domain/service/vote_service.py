"""Vote domain service."""

from datetime import datetime, timezone
from typing import Any, Iterable, Sequence
from uuid import uuid4

import logfire

from voteledger.config import VotingSettings
from voteledger.domain.error import VoteConflictError
from voteledger.domain.model import (
    CastResult,
    ReputationSummary,
    Vote,
    VoteTally,
    VoteTransition,
)
from voteledger.domain.repository import VoteRepository
from voteledger.domain.value import (
    ContentId,
    ContentKind,
    ContentRef,
    UserId,
    VoteDirection,
    VoteId,
)
from voteledger.domain.value.types import parse_content_id

from .reputation import temperature_for


class VoteService:
    """Domain service for the vote ledger.

    Casting is a three-way toggle on the (voter, item) pair:

    ============  ==========  ==========  ===========
    stored        cast UP     cast DOWN   result
    ============  ==========  ==========  ===========
    none          insert UP   insert DOWN CREATED
    UP            delete      flip DOWN   RETRACTED / FLIPPED
    DOWN          flip UP     delete      FLIPPED / RETRACTED
    ============  ==========  ==========  ===========
    """

    def __init__(
        self, vote_repository: VoteRepository, voting_settings: VotingSettings
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            voting_settings: Vote ledger settings
        """
        self.vote_repository = vote_repository
        self.max_cast_attempts = max(1, voting_settings.max_cast_attempts)

    async def cast(
        self, voter_id: UserId, target: ContentRef, direction: Any
    ) -> CastResult:
        """Cast an up or down vote, toggling or flipping an existing one.

        Args:
            voter_id: Authenticated voter
            target: Item voted on
            direction: VoteDirection.UP or VoteDirection.DOWN (or +1 / -1)

        Returns:
            Updated tally and the voter's resulting direction

        Raises:
            InvalidDirectionError: If direction is not UP or DOWN
            VoteConflictError: If concurrent casts by the same voter kept
                moving the vote for every attempt
            SQLAlchemyError: If the write could not be committed
        """
        direction = VoteDirection.castable(direction)

        with logfire.span(
            "cast_vote",
            voter_id=str(voter_id),
            target=str(target),
            direction=int(direction),
        ):
            transition = await self._apply_cast(voter_id, target, direction)
            await self.vote_repository.commit()
            tally = await self.vote_repository.tally(target)

            if transition == VoteTransition.RETRACTED:
                user_direction = VoteDirection.NEUTRAL
            else:
                user_direction = direction

            logfire.info(
                "Vote cast",
                voter_id=str(voter_id),
                target=str(target),
                transition=transition.value,
                score=tally.score,
            )
            return CastResult(
                tally=tally, user_direction=user_direction, transition=transition
            )

    async def _apply_cast(
        self, voter_id: UserId, target: ContentRef, direction: VoteDirection
    ) -> VoteTransition:
        """Run the toggle as conditional writes, retrying lost races."""
        for attempt in range(1, self.max_cast_attempts + 1):
            # Same direction already stored: clicking again retracts it
            if await self.vote_repository.delete_if_direction(
                voter_id, target, direction
            ):
                return VoteTransition.RETRACTED

            vote = Vote(
                id=VoteId(uuid4()),
                voter_id=voter_id,
                target=target,
                direction=direction,
                cast_at=datetime.now(timezone.utc),
            )
            transition = await self.vote_repository.insert_or_flip(vote)
            if transition is not None:
                return transition

            # Between the two writes another cast stored this same direction
            logfire.warn(
                "Vote moved by concurrent cast, retrying",
                voter_id=str(voter_id),
                target=str(target),
                attempt=attempt,
            )

        logfire.error(
            "Vote cast gave up",
            voter_id=str(voter_id),
            target=str(target),
            attempts=self.max_cast_attempts,
        )
        raise VoteConflictError(self.max_cast_attempts)

    async def withdraw(self, voter_id: UserId, target: ContentRef) -> VoteTally:
        """Remove the voter's vote on an item, if any.

        Idempotent: withdrawing with no vote stored changes nothing.

        Args:
            voter_id: Authenticated voter
            target: Item voted on

        Returns:
            Updated tally

        Raises:
            SQLAlchemyError: If the delete could not be committed
        """
        with logfire.span(
            "withdraw_vote", voter_id=str(voter_id), target=str(target)
        ):
            deleted = await self.vote_repository.delete_by_voter_and_target(
                voter_id, target
            )
            await self.vote_repository.commit()
            if deleted:
                logfire.info(
                    "Vote withdrawn", voter_id=str(voter_id), target=str(target)
                )
            else:
                logfire.info(
                    "No vote to withdraw", voter_id=str(voter_id), target=str(target)
                )
            return await self.vote_repository.tally(target)

    async def aggregate(self, target: ContentRef) -> VoteTally:
        """Tally votes on an item. Unknown items have a zero tally."""
        return await self.vote_repository.tally(target)

    async def user_direction(
        self, voter_id: UserId, target: ContentRef
    ) -> VoteDirection:
        """The voter's current direction on an item, NEUTRAL if none."""
        vote = await self.vote_repository.find_by_voter_and_target(voter_id, target)
        return vote.direction if vote else VoteDirection.NEUTRAL

    async def user_directions(
        self, voter_id: UserId, kind: Any, content_ids: Iterable[Any]
    ) -> dict[ContentId, VoteDirection]:
        """The voter's direction on each of several items of one kind.

        Args:
            voter_id: Authenticated voter
            kind: Kind shared by all the items
            content_ids: Item IDs, e.g. one page of a listing

        Returns:
            Dictionary mapping each ID to the voter's direction
        """
        kind = ContentKind.parse(kind)
        ids = list(dict.fromkeys(parse_content_id(cid) for cid in content_ids))
        if not ids:
            return {}

        # Batch query to fetch all votes at once (avoid N+1)
        votes = await self.vote_repository.find_by_voter_and_targets(
            voter_id, kind, ids
        )
        voted = {vote.target.id: vote.direction for vote in votes}
        return {cid: voted.get(cid, VoteDirection.NEUTRAL) for cid in ids}

    async def reputation_summary(
        self, user_id: UserId, owned: Sequence[ContentRef]
    ) -> ReputationSummary:
        """Fold the tallies of a user's content into a reputation summary.

        Which items a user owns is decided by the content services; this
        only counts the votes on them. Nothing is stored.

        Args:
            user_id: Owner of the content
            owned: Items the user owns; duplicates are counted once

        Returns:
            Votes received, net score and temperature
        """
        with logfire.span(
            "reputation_summary", user_id=str(user_id), items=len(owned)
        ):
            unique = list(dict.fromkeys(owned))
            total = VoteTally()
            if unique:
                tallies = await self.vote_repository.tally_many(unique)
                for tally in tallies.values():
                    total = total + tally

            return ReputationSummary(
                upvotes_received=total.upvotes,
                downvotes_received=total.downvotes,
                net_score=total.score,
                temperature=temperature_for(total.score),
            )

    async def reputation_temperature(
        self, user_id: UserId, owned: Sequence[ContentRef]
    ) -> float:
        """36.5 plus 0.01 per net vote received, rounded to one decimal."""
        summary = await self.reputation_summary(user_id, owned)
        return summary.temperature
