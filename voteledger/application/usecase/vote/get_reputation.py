"""Get reputation use case."""

from uuid import UUID

from pydantic import BaseModel

from voteledger.application.usecase.base import BaseUseCase
from voteledger.domain.service import VoteService
from voteledger.domain.value import ContentRef, UserId


class OwnedContent(BaseModel):
    """One item owned by the user."""

    content_type: str
    content_id: int


class GetReputationRequest(BaseModel):
    """Get reputation request.

    The content list comes from the services that own posts, comments and
    articles; the ledger trusts it as given.
    """

    user_id: str
    content: list[OwnedContent]


class ReputationResponse(BaseModel):
    """Votes received and the derived temperature."""

    upvotes_received: int
    downvotes_received: int
    net_score: int
    temperature: float


class GetReputationUseCase(
    BaseUseCase[GetReputationRequest, ReputationResponse]
):
    """Use case for computing a user's reputation temperature."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize get reputation use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: GetReputationRequest) -> ReputationResponse:
        """Execute get reputation flow.

        Raises:
            InvalidContentKindError: If any content type is unknown
            InvalidContentIdError: If any content id is not positive
        """
        user_id = UserId(UUID(request.user_id))
        owned = [
            ContentRef.of(item.content_type, item.content_id)
            for item in request.content
        ]

        summary = await self.vote_service.reputation_summary(user_id, owned)
        return ReputationResponse(
            upvotes_received=summary.upvotes_received,
            downvotes_received=summary.downvotes_received,
            net_score=summary.net_score,
            temperature=summary.temperature,
        )
