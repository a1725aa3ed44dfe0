"""Get user vote use cases."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from voteledger.application.usecase.base import BaseUseCase
from voteledger.domain.service import VoteService
from voteledger.domain.value import ContentRef, UserId


class GetUserVoteRequest(BaseModel):
    """Get user vote request."""

    content_type: str
    content_id: int
    user_id: str  # User ID from authenticated user


class UserVoteResponse(BaseModel):
    """The caller's own vote: 1, -1, or 0 when they have not voted."""

    model_config = ConfigDict(populate_by_name=True)

    user_vote: int = Field(alias="userVote")


class GetUserVoteUseCase(BaseUseCase[GetUserVoteRequest, UserVoteResponse]):
    """Use case for reading the caller's vote on one item."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize get user vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: GetUserVoteRequest) -> UserVoteResponse:
        """Execute get user vote flow."""
        target = ContentRef.of(request.content_type, request.content_id)
        user_id = UserId(UUID(request.user_id))

        direction = await self.vote_service.user_direction(user_id, target)
        return UserVoteResponse(user_vote=int(direction))


class GetUserVotesRequest(BaseModel):
    """Batch user vote request for items of one kind."""

    content_type: str
    content_ids: list[int]
    user_id: str  # User ID from authenticated user


class UserVotesResponse(BaseModel):
    """The caller's vote on each requested item."""

    votes: dict[int, int]


class GetUserVotesUseCase(BaseUseCase[GetUserVotesRequest, UserVotesResponse]):
    """Use case for reading the caller's votes on a page of items."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize get user votes use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: GetUserVotesRequest) -> UserVotesResponse:
        """Execute batch user vote flow.

        Raises:
            InvalidContentKindError: If content type is unknown
            InvalidContentIdError: If any content id is not positive
        """
        user_id = UserId(UUID(request.user_id))

        directions = await self.vote_service.user_directions(
            user_id, request.content_type, request.content_ids
        )
        return UserVotesResponse(
            votes={cid: int(direction) for cid, direction in directions.items()}
        )
