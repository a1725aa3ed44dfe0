"""Vote use cases."""

from .cast_vote import CastVoteRequest, CastVoteResponse, CastVoteUseCase
from .get_reputation import (
    GetReputationRequest,
    GetReputationUseCase,
    OwnedContent,
    ReputationResponse,
)
from .get_tally import GetTallyRequest, GetTallyUseCase, TallyResponse
from .get_user_vote import (
    GetUserVoteRequest,
    GetUserVotesRequest,
    GetUserVotesUseCase,
    GetUserVoteUseCase,
    UserVoteResponse,
    UserVotesResponse,
)
from .withdraw_vote import WithdrawVoteRequest, WithdrawVoteUseCase

__all__ = [
    "CastVoteRequest",
    "CastVoteResponse",
    "CastVoteUseCase",
    "GetReputationRequest",
    "GetReputationUseCase",
    "OwnedContent",
    "ReputationResponse",
    "GetTallyRequest",
    "GetTallyUseCase",
    "TallyResponse",
    "GetUserVoteRequest",
    "GetUserVoteUseCase",
    "GetUserVotesRequest",
    "GetUserVotesUseCase",
    "UserVoteResponse",
    "UserVotesResponse",
    "WithdrawVoteRequest",
    "WithdrawVoteUseCase",
]
