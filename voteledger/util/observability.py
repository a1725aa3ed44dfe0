"""Observability configuration using Logfire.

Usage:
    import logfire

    logfire.info("Vote cast", voter_id=str(voter_id), target=str(target))

    with logfire.span("cast_vote", target=str(target)):
        ...
"""

from typing import Any

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from voteledger.config import Settings

SERVICE_NAME = "voteledger"
SERVICE_VERSION = "0.1.0"

# Endpoint arguments worth attaching to request spans
_TRACED_ARGUMENTS = ("kind", "content_id", "user_id", "ids")

# Probes hit /health every few seconds
_UNTRACED_URLS = "/health"


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for observability.

    Token Configuration:
    - Set OBSERVABILITY__LOGFIRE_TOKEN to enable cloud sending
    - If token is present, logs are sent to Logfire cloud by default
    - OBSERVABILITY__SEND_TO_LOGFIRE overrides either way

    Args:
        settings: Application settings
    """
    observability = settings.observability
    if observability.send_to_logfire is None:
        send_to_logfire = bool(observability.logfire_token)
    else:
        send_to_logfire = observability.send_to_logfire

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=observability.logfire_token or None,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
        # Session tokens travel in a cookie named after the auth settings
        scrubbing=logfire.ScrubbingOptions(
            extra_patterns=[settings.auth.cookie_name, "bearer"]
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        debug=settings.debug,
        send_to_logfire=send_to_logfire,
        git_sha=settings.git_sha,
    )


def _vote_request_attributes(
    request: Any, attributes: dict[str, Any]
) -> dict[str, Any] | None:
    """Keep the vote target on request spans and drop everything else.

    Endpoint values include the auth cookie and Authorization header, which
    must never be exported.
    """
    values = attributes.get("values") or {}
    traced = {name: values[name] for name in _TRACED_ARGUMENTS if name in values}

    body = values.get("body")
    if body is not None and hasattr(body, "content_type"):
        traced["content_type"] = body.content_type
        traced["content_id"] = body.content_id

    errors = attributes.get("errors")
    if errors:
        traced["errors"] = errors

    return traced


def instrument_fastapi(app: FastAPI) -> None:
    """Instrument FastAPI application with Logfire.

    Traces every request except health probes, tagged with the item voted on.

    Args:
        app: FastAPI application instance
    """
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_vote_request_attributes,
        excluded_urls=_UNTRACED_URLS,
    )
    logfire.info("FastAPI instrumented")


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Instrument SQLAlchemy engine with Logfire.

    Traces every SQL statement, including the ledger's conditional writes.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
    logfire.info("SQLAlchemy instrumented")
