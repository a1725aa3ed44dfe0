"""Unit tests for InMemoryVoteRepository."""

from uuid import uuid4

import pytest

from voteledger.domain.model import Vote, VoteTally, VoteTransition
from voteledger.domain.value import ContentKind, UserId, VoteDirection, VoteId
from voteledger.persistence.repository.inmemory import InMemoryVoteRepository
from tests.conftest import make_ref, new_user


def _vote(voter_id: UserId, direction: VoteDirection, kind="post", content_id=7):
    return Vote(
        id=VoteId(uuid4()),
        voter_id=voter_id,
        target=make_ref(kind, content_id),
        direction=direction,
    )


class TestConditionalWrites:
    """Tests for delete_if_direction and insert_or_flip."""

    @pytest.mark.asyncio
    async def test_insert_then_flip_then_noop(self):
        # Arrange
        repo = InMemoryVoteRepository()
        voter = new_user()

        # Act & Assert
        assert await repo.insert_or_flip(_vote(voter, VoteDirection.UP)) == (
            VoteTransition.CREATED
        )
        assert await repo.insert_or_flip(_vote(voter, VoteDirection.DOWN)) == (
            VoteTransition.FLIPPED
        )
        # Same direction as stored: nothing to do, caller must retry
        assert await repo.insert_or_flip(_vote(voter, VoteDirection.DOWN)) is None
        assert repo.count_rows(voter, make_ref()) == 1

    @pytest.mark.asyncio
    async def test_delete_only_matching_direction(self):
        # Arrange
        repo = InMemoryVoteRepository()
        voter = new_user()
        target = make_ref()
        await repo.insert_or_flip(_vote(voter, VoteDirection.UP))

        # Act & Assert
        assert not await repo.delete_if_direction(voter, target, VoteDirection.DOWN)
        assert repo.count_rows(voter, target) == 1
        assert await repo.delete_if_direction(voter, target, VoteDirection.UP)
        assert repo.count_rows(voter, target) == 0

    @pytest.mark.asyncio
    async def test_delete_by_voter_and_target(self):
        repo = InMemoryVoteRepository()
        voter = new_user()
        await repo.insert_or_flip(_vote(voter, VoteDirection.DOWN))

        assert await repo.delete_by_voter_and_target(voter, make_ref())
        assert not await repo.delete_by_voter_and_target(voter, make_ref())


class TestReads:
    """Tests for finds and tallies."""

    @pytest.mark.asyncio
    async def test_find_by_voter_and_targets_filters_kind(self):
        # Arrange
        repo = InMemoryVoteRepository()
        voter = new_user()
        await repo.insert_or_flip(_vote(voter, VoteDirection.UP, "post", 1))
        await repo.insert_or_flip(_vote(voter, VoteDirection.UP, "comment", 1))
        await repo.insert_or_flip(_vote(new_user(), VoteDirection.UP, "post", 2))

        # Act
        votes = await repo.find_by_voter_and_targets(voter, ContentKind.POST, [1, 2])

        # Assert
        assert [v.target for v in votes] == [make_ref("post", 1)]

    @pytest.mark.asyncio
    async def test_tally_many(self):
        # Arrange
        repo = InMemoryVoteRepository()
        await repo.insert_or_flip(_vote(new_user(), VoteDirection.UP, "post", 1))
        await repo.insert_or_flip(_vote(new_user(), VoteDirection.DOWN, "post", 1))
        await repo.insert_or_flip(_vote(new_user(), VoteDirection.UP, "article", 1))

        # Act
        tallies = await repo.tally_many(
            [make_ref("post", 1), make_ref("article", 1), make_ref("comment", 1)]
        )

        # Assert
        assert tallies == {
            make_ref("post", 1): VoteTally(upvotes=1, downvotes=1),
            make_ref("article", 1): VoteTally(upvotes=1),
            make_ref("comment", 1): VoteTally(),
        }
