"""Standard library logging bridged into Logfire."""

import logging

import logfire

from voteledger.config import Settings

# Libraries that log through ``logging`` and how loud they may be
_LIBRARY_LEVELS = {
    "asyncpg": logging.WARNING,
    "alembic": logging.INFO,
    "uvicorn.error": logging.INFO,
    # Request spans already come from the FastAPI instrumentation
    "uvicorn.access": logging.WARNING,
}


def setup_logging(settings: Settings) -> None:
    """Send standard library log records to Logfire.

    The application logs through ``logfire`` directly; this catches what
    SQLAlchemy, asyncpg, Alembic and uvicorn emit so it lands in the same
    trace as the request that caused it. Call after ``configure_logfire``.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        handlers=[logfire.LogfireLoggingHandler()],
        force=True,  # Replace handlers installed by imported libraries
    )

    # SQL echo is only useful while debugging the conditional writes
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.debug else logging.WARNING
    )
    for name, library_level in _LIBRARY_LEVELS.items():
        logging.getLogger(name).setLevel(library_level)

    logging.getLogger(__name__).info(
        "Logging configured: environment=%s, level=%s",
        settings.environment,
        logging.getLevelName(level),
    )
