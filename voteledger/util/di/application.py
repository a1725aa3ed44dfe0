"""Application layer DI providers."""

from dishka import Scope, provide

from voteledger.application.usecase.vote import (
    CastVoteUseCase,
    GetReputationUseCase,
    GetTallyUseCase,
    GetUserVotesUseCase,
    GetUserVoteUseCase,
    WithdrawVoteUseCase,
)
from voteledger.domain.service import VoteService
from voteledger.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    @provide
    def get_cast_vote_use_case(self, vote_service: VoteService) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_service=vote_service)

    @provide
    def get_withdraw_vote_use_case(
        self, vote_service: VoteService
    ) -> WithdrawVoteUseCase:
        """Provide withdraw vote use case."""
        return WithdrawVoteUseCase(vote_service=vote_service)

    @provide
    def get_tally_use_case(self, vote_service: VoteService) -> GetTallyUseCase:
        """Provide get tally use case."""
        return GetTallyUseCase(vote_service=vote_service)

    @provide
    def get_user_vote_use_case(self, vote_service: VoteService) -> GetUserVoteUseCase:
        """Provide get user vote use case."""
        return GetUserVoteUseCase(vote_service=vote_service)

    @provide
    def get_user_votes_use_case(
        self, vote_service: VoteService
    ) -> GetUserVotesUseCase:
        """Provide batch user votes use case."""
        return GetUserVotesUseCase(vote_service=vote_service)

    @provide
    def get_reputation_use_case(
        self, vote_service: VoteService
    ) -> GetReputationUseCase:
        """Provide get reputation use case."""
        return GetReputationUseCase(vote_service=vote_service)
