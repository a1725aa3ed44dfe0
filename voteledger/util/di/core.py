"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from voteledger.config import AuthSettings, Settings, VotingSettings
from voteledger.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Config provider - settings come from environment and .env."""

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_voting_settings(self, settings: Settings) -> VotingSettings:
        """Provide vote ledger settings."""
        return settings.voting
