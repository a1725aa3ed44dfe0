"""Cast vote use case."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, StrictInt

from voteledger.application.usecase.base import BaseUseCase
from voteledger.domain.service import VoteService
from voteledger.domain.value import ContentRef, UserId

from .get_tally import TallyResponse


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    content_type: str
    content_id: int
    vote_type: StrictInt  # 1 upvote, -1 downvote; booleans and strings rejected
    user_id: str  # User ID from authenticated user


class CastVoteResponse(TallyResponse):
    """Cast vote response: updated counts plus the caller's vote."""

    model_config = ConfigDict(populate_by_name=True)

    user_vote: int = Field(alias="userVote")


class CastVoteUseCase(BaseUseCase[CastVoteRequest, CastVoteResponse]):
    """Use case for casting, flipping or retracting a vote."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Casting the direction already stored retracts the vote, casting the
        opposite direction flips it.

        Args:
            request: Cast vote request

        Returns:
            Updated counts and the caller's resulting vote (0 after a retract)

        Raises:
            InvalidContentKindError: If content type is unknown
            InvalidContentIdError: If content id is not positive
            InvalidDirectionError: If vote type is not 1 or -1
        """
        target = ContentRef.of(request.content_type, request.content_id)
        user_id = UserId(UUID(request.user_id))

        result = await self.vote_service.cast(user_id, target, request.vote_type)

        return CastVoteResponse(
            upvotes=result.tally.upvotes,
            downvotes=result.tally.downvotes,
            score=result.tally.score,
            user_vote=int(result.user_direction),
        )
