#!/usr/bin/env python3
"""Start the vote ledger API, logging startup failures to Logfire."""

import sys

import logfire
import uvicorn

from voteledger.config import Settings
from voteledger.util.logging import setup_logging
from voteledger.util.observability import configure_logfire

APP_FACTORY = "voteledger.interface.api.app:create_app"


def main() -> int:
    """Serve the app factory with uvicorn."""
    settings = Settings()

    configure_logfire(settings)
    setup_logging(settings)

    try:
        logfire.info(
            "Starting vote ledger API",
            host=settings.host,
            port=settings.port,
            max_cast_attempts=settings.voting.max_cast_attempts,
        )

        # create_app builds the DI container, so each worker gets its own pool
        uvicorn.run(
            APP_FACTORY,
            factory=True,
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
            log_config=None,  # Keep the Logfire handler from setup_logging
        )

        return 0

    except Exception as e:
        logfire.error(
            "Vote ledger API failed to start",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the container fails properly
        raise


if __name__ == "__main__":
    sys.exit(main())
