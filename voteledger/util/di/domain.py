"""Domain layer DI providers."""

from dishka import Scope, provide

from voteledger.config import AuthSettings, VotingSettings
from voteledger.domain.repository import VoteRepository
from voteledger.domain.service import JWTService, VoteService
from voteledger.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services provider.

    Services are REQUEST-scoped to align with the repository/session
    lifecycle: each HTTP request gets its own transaction.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT verification service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_vote_service(
        self, vote_repository: VoteRepository, voting_settings: VotingSettings
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository, voting_settings=voting_settings
        )
