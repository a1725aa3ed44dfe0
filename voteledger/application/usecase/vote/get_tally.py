"""Get vote tally use case."""

from pydantic import BaseModel

from voteledger.application.usecase.base import BaseUseCase
from voteledger.domain.model import VoteTally
from voteledger.domain.service import VoteService
from voteledger.domain.value import ContentRef


class GetTallyRequest(BaseModel):
    """Get tally request."""

    content_type: str
    content_id: int


class TallyResponse(BaseModel):
    """Vote counts for one item."""

    upvotes: int
    downvotes: int
    score: int

    @classmethod
    def from_tally(cls, tally: VoteTally) -> "TallyResponse":
        return cls(upvotes=tally.upvotes, downvotes=tally.downvotes, score=tally.score)


class GetTallyUseCase(BaseUseCase[GetTallyRequest, TallyResponse]):
    """Use case for reading the vote counts of an item. No login needed."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize get tally use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: GetTallyRequest) -> TallyResponse:
        """Execute get tally flow.

        Raises:
            InvalidContentKindError: If content type is unknown
            InvalidContentIdError: If content id is not positive
        """
        target = ContentRef.of(request.content_type, request.content_id)
        tally = await self.vote_service.aggregate(target)
        return TallyResponse.from_tally(tally)
