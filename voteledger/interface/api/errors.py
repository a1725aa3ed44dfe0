"""Exception handlers mapping errors to HTTP responses."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from voteledger.domain.error import ValidationError, VoteConflictError
from voteledger.interface.error import NotAuthenticatedError


async def validation_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Unknown content kind, bad direction or bad id: 400, nothing stored."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)}
    )


async def not_authenticated_handler(request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED, content={"detail": str(exc)}
    )


async def vote_conflict_handler(request: Request, exc: Exception) -> JSONResponse:
    """Concurrent casts on the same item kept colliding; caller may retry."""
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT, content={"detail": str(exc)}
    )


async def storage_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Storage failure: the request transaction has been rolled back."""
    logfire.error(
        "Storage error",
        path=request.url.path,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Server error"},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register exception handlers on the application."""
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(NotAuthenticatedError, not_authenticated_handler)
    app.add_exception_handler(VoteConflictError, vote_conflict_handler)
    app.add_exception_handler(SQLAlchemyError, storage_error_handler)
