"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from voteledger.config import Settings
from voteledger.interface.api.errors import register_error_handlers
from voteledger.interface.api.routes import health, votes
from voteledger.util.di.container import create_container, setup_di
from voteledger.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, scripts/start_app.py handles this and serves the app
    through uvicorn's factory mode.

    Args:
        container: DI container to use, the production container by default
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Vote Ledger API",
        description="Votes, tallies and reputation for marketplace listings, comments and articles",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    setup_di(app_instance, container or create_container())

    register_error_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(votes.router)

    return app_instance
