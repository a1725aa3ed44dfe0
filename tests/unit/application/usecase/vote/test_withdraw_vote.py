"""Unit tests for WithdrawVoteUseCase."""

from uuid import uuid4

import pytest

from voteledger.application.usecase.vote import (
    CastVoteRequest,
    CastVoteUseCase,
    WithdrawVoteRequest,
    WithdrawVoteUseCase,
)
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestWithdrawVoteUseCase:
    """Tests for WithdrawVoteUseCase."""

    @pytest.mark.asyncio
    async def test_withdraw_returns_updated_counts(self, unit_env):
        # Arrange
        cast = await unit_env.get(CastVoteUseCase)
        withdraw = await unit_env.get(WithdrawVoteUseCase)
        voter, other = str(uuid4()), str(uuid4())
        for user_id in (voter, other):
            await cast.execute(
                CastVoteRequest(
                    content_type="post", content_id=7, vote_type=1, user_id=user_id
                )
            )

        # Act
        response = await withdraw.execute(
            WithdrawVoteRequest(content_type="post", content_id=7, user_id=voter)
        )

        # Assert
        assert (response.upvotes, response.downvotes, response.score) == (1, 0, 1)

    @pytest.mark.asyncio
    async def test_withdraw_without_vote_is_noop(self, unit_env):
        # Arrange
        withdraw = await unit_env.get(WithdrawVoteUseCase)

        # Act
        response = await withdraw.execute(
            WithdrawVoteRequest(
                content_type="article_comment", content_id=2, user_id=str(uuid4())
            )
        )

        # Assert
        assert (response.upvotes, response.downvotes, response.score) == (0, 0, 0)
