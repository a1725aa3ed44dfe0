"""PostgreSQL implementation of Vote repository."""

from typing import Dict, Optional, Sequence

from sqlalchemy import and_, delete, func, select, tuple_
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from voteledger.domain.model import Vote, VoteTally, VoteTransition
from voteledger.domain.repository import VoteRepository
from voteledger.domain.value import (
    ContentId,
    ContentKind,
    ContentRef,
    UserId,
    VoteDirection,
)
from voteledger.persistence.mappers import row_to_vote, vote_to_dict
from voteledger.persistence.tables import VOTER_TARGET_CONSTRAINT, votes_table

_upvotes = func.count().filter(votes_table.c.direction == int(VoteDirection.UP))
_downvotes = func.count().filter(votes_table.c.direction == int(VoteDirection.DOWN))


def _target_matches(target: ContentRef):
    return and_(
        votes_table.c.content_kind == target.kind.value,
        votes_table.c.content_id == target.id,
    )


def _key_matches(voter_id: UserId, target: ContentRef):
    return and_(votes_table.c.user_id == voter_id, _target_matches(target))


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository.

    Conditional writes take the row lock on the (voter, kind, id) row, so
    concurrent casts by one voter on one item queue behind each other while
    other voters are never blocked.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_voter_and_target(
        self, voter_id: UserId, target: ContentRef
    ) -> Optional[Vote]:
        """Find a user's vote on a specific item."""
        stmt = select(votes_table).where(_key_matches(voter_id, target))
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_voter_and_targets(
        self,
        voter_id: UserId,
        kind: ContentKind,
        content_ids: Sequence[ContentId],
    ) -> list[Vote]:
        """Find a user's votes on multiple items of one kind (batch query)."""
        if not content_ids:
            return []

        stmt = select(votes_table).where(
            and_(
                votes_table.c.user_id == voter_id,
                votes_table.c.content_kind == kind.value,
                votes_table.c.content_id.in_(content_ids),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def delete_if_direction(
        self, voter_id: UserId, target: ContentRef, direction: VoteDirection
    ) -> bool:
        """Delete the voter's vote only if it currently points ``direction``."""
        stmt = delete(votes_table).where(
            and_(
                _key_matches(voter_id, target),
                votes_table.c.direction == int(direction),
            )
        )
        result = await self.session.execute(stmt)
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def insert_or_flip(self, vote: Vote) -> Optional[VoteTransition]:
        """Insert the vote, or flip an opposite vote in place.

        Single INSERT ... ON CONFLICT DO UPDATE ... WHERE statement. The
        update keeps the stored row's id, which tells a flip from an insert.
        """
        stmt = insert(votes_table).values(**vote_to_dict(vote))
        stmt = stmt.on_conflict_do_update(
            constraint=VOTER_TARGET_CONSTRAINT,
            set_={
                "direction": stmt.excluded.direction,
                "cast_at": stmt.excluded.cast_at,
            },
            where=votes_table.c.direction != stmt.excluded.direction,
        ).returning(votes_table.c.id)

        result = await self.session.execute(stmt)
        row = result.fetchone()
        if row is None:
            return None
        return VoteTransition.CREATED if row.id == vote.id else VoteTransition.FLIPPED

    async def delete_by_voter_and_target(
        self, voter_id: UserId, target: ContentRef
    ) -> bool:
        """Delete the voter's vote on an item, whatever its direction."""
        stmt = delete(votes_table).where(_key_matches(voter_id, target))
        result = await self.session.execute(stmt)
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def commit(self) -> None:
        """Commit the request transaction."""
        await self.session.commit()

    async def tally(self, target: ContentRef) -> VoteTally:
        """Count up and down votes on an item."""
        stmt = select(
            _upvotes.label("upvotes"), _downvotes.label("downvotes")
        ).where(_target_matches(target))
        result = await self.session.execute(stmt)
        row = result.one()
        return VoteTally(upvotes=row.upvotes, downvotes=row.downvotes)

    async def tally_many(
        self, targets: Sequence[ContentRef]
    ) -> Dict[ContentRef, VoteTally]:
        """Count votes on several items in one grouped query."""
        tallies = {target: VoteTally() for target in targets}
        if not tallies:
            return tallies

        keys = [(target.kind.value, target.id) for target in tallies]
        stmt = (
            select(
                votes_table.c.content_kind,
                votes_table.c.content_id,
                _upvotes.label("upvotes"),
                _downvotes.label("downvotes"),
            )
            .where(tuple_(votes_table.c.content_kind, votes_table.c.content_id).in_(keys))
            .group_by(votes_table.c.content_kind, votes_table.c.content_id)
        )
        result = await self.session.execute(stmt)
        for row in result.fetchall():
            target = ContentRef(kind=row.content_kind, id=row.content_id)
            tallies[target] = VoteTally(upvotes=row.upvotes, downvotes=row.downvotes)
        return tallies
