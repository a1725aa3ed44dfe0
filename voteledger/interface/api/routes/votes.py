"""Vote routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, Request
from pydantic import BaseModel, StrictInt

from voteledger.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
    GetReputationRequest,
    GetReputationUseCase,
    GetTallyRequest,
    GetTallyUseCase,
    GetUserVoteRequest,
    GetUserVotesRequest,
    GetUserVotesUseCase,
    GetUserVoteUseCase,
    OwnedContent,
    ReputationResponse,
    TallyResponse,
    UserVoteResponse,
    UserVotesResponse,
    WithdrawVoteRequest,
    WithdrawVoteUseCase,
)
from voteledger.domain.service import JWTService
from voteledger.interface.api.auth import require_user_id

router = APIRouter(prefix="/votes", tags=["votes"], route_class=DishkaRoute)


class CastVoteBody(BaseModel):
    """Body of a cast request."""

    content_type: str
    content_id: int
    vote_type: StrictInt


class ReputationBody(BaseModel):
    """Items owned by the user, as listed by the content services."""

    content: list[OwnedContent]


@router.post("", response_model=CastVoteResponse)
async def cast_vote(
    body: CastVoteBody,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    http_request: Request,
) -> CastVoteResponse:
    """Cast an upvote (1) or downvote (-1).

    Casting your current vote again retracts it; casting the opposite one
    flips it. Requires authentication.

    Returns:
        Updated counts and the caller's resulting vote
    """
    user_id = require_user_id(jwt_service, http_request)

    request = CastVoteRequest(
        content_type=body.content_type,
        content_id=body.content_id,
        vote_type=body.vote_type,
        user_id=str(user_id),
    )
    return await cast_vote_use_case.execute(request)


@router.post("/reputation/{user_id}", response_model=ReputationResponse)
async def get_reputation(
    user_id: UUID,
    body: ReputationBody,
    get_reputation_use_case: FromDishka[GetReputationUseCase],
) -> ReputationResponse:
    """Votes received across a user's content and the derived temperature.

    Returns:
        Upvotes and downvotes received, net score and temperature
    """
    request = GetReputationRequest(user_id=str(user_id), content=body.content)
    return await get_reputation_use_case.execute(request)


@router.get("/{kind}/user", response_model=UserVotesResponse)
async def get_user_votes(
    kind: str,
    get_user_votes_use_case: FromDishka[GetUserVotesUseCase],
    jwt_service: FromDishka[JWTService],
    http_request: Request,
    ids: list[int] = Query(default=[]),
) -> UserVotesResponse:
    """The caller's votes on several items of one kind, e.g. a listing page.

    Requires authentication.
    """
    user_id = require_user_id(jwt_service, http_request, "read votes")

    request = GetUserVotesRequest(
        content_type=kind, content_ids=ids, user_id=str(user_id)
    )
    return await get_user_votes_use_case.execute(request)


@router.get("/{kind}/{content_id}", response_model=TallyResponse)
async def get_tally(
    kind: str,
    content_id: int,
    get_tally_use_case: FromDishka[GetTallyUseCase],
) -> TallyResponse:
    """Vote counts for an item. Items nobody voted on return zeros."""
    request = GetTallyRequest(content_type=kind, content_id=content_id)
    return await get_tally_use_case.execute(request)


@router.get("/{kind}/{content_id}/user", response_model=UserVoteResponse)
async def get_user_vote(
    kind: str,
    content_id: int,
    get_user_vote_use_case: FromDishka[GetUserVoteUseCase],
    jwt_service: FromDishka[JWTService],
    http_request: Request,
) -> UserVoteResponse:
    """The caller's own vote on an item: 1, -1, or 0.

    Requires authentication.
    """
    user_id = require_user_id(jwt_service, http_request, "read votes")

    request = GetUserVoteRequest(
        content_type=kind, content_id=content_id, user_id=str(user_id)
    )
    return await get_user_vote_use_case.execute(request)


@router.delete("/{kind}/{content_id}", response_model=TallyResponse)
async def withdraw_vote(
    kind: str,
    content_id: int,
    withdraw_vote_use_case: FromDishka[WithdrawVoteUseCase],
    jwt_service: FromDishka[JWTService],
    http_request: Request,
) -> TallyResponse:
    """Remove the caller's vote on an item. No-op if there is none.

    Requires authentication.
    """
    user_id = require_user_id(jwt_service, http_request, "remove a vote")

    request = WithdrawVoteRequest(
        content_type=kind, content_id=content_id, user_id=str(user_id)
    )
    return await withdraw_vote_use_case.execute(request)
