"""Withdraw vote use case."""

from uuid import UUID

from pydantic import BaseModel

from voteledger.application.usecase.base import BaseUseCase
from voteledger.domain.service import VoteService
from voteledger.domain.value import ContentRef, UserId

from .get_tally import TallyResponse


class WithdrawVoteRequest(BaseModel):
    """Withdraw vote request."""

    content_type: str
    content_id: int
    user_id: str  # User ID from authenticated user


class WithdrawVoteUseCase(BaseUseCase[WithdrawVoteRequest, TallyResponse]):
    """Use case for removing a user's vote from an item."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize withdraw vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: WithdrawVoteRequest) -> TallyResponse:
        """Execute withdraw vote flow.

        Withdrawing when no vote exists is not an error.

        Args:
            request: Withdraw vote request

        Returns:
            Updated counts
        """
        target = ContentRef.of(request.content_type, request.content_id)
        user_id = UserId(UUID(request.user_id))

        tally = await self.vote_service.withdraw(user_id, target)
        return TallyResponse.from_tally(tally)
