"""Domain services."""

from .jwt_service import JWTService
from .reputation import temperature_for
from .vote_service import VoteService

__all__ = [
    "JWTService",
    "VoteService",
    "temperature_for",
]
