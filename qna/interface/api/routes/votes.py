"""Vote routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header
from pydantic import BaseModel

from qna.application.usecase.vote import (
    ApplyVoteRequest,
    ApplyVoteUseCase,
    GetVoteStateRequest,
    GetVoteStateUseCase,
    VoteResponse,
)
from qna.domain.service import JWTService
from qna.domain.value import VotableType
from qna.interface.api.auth import require_identity

router = APIRouter(tags=["votes"], route_class=DishkaRoute)


class VoteAPIRequest(BaseModel):
    """API request for casting a vote.

    Sending the current direction again retracts the vote; sending the
    opposite direction switches it.
    """

    direction: str


@router.post("/questions/{question_id}/vote", response_model=VoteResponse)
async def vote_question(
    question_id: UUID,
    request: VoteAPIRequest,
    apply_vote_use_case: FromDishka[ApplyVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> VoteResponse:
    """Toggle the caller's vote on a question.

    Args:
        question_id: Question UUID
        request: Vote direction ("up" or "down")
        apply_vote_use_case: Apply vote use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie
        authorization: Optional bearer header

    Returns:
        Vote totals and the caller's current direction
    """
    identity = require_identity(
        jwt_service, auth_token, authorization, "Authentication required to vote"
    )
    return await apply_vote_use_case.execute(
        ApplyVoteRequest(
            votable_type=VotableType.QUESTION,
            votable_id=str(question_id),
            user_id=str(identity.user_id),
            direction=request.direction,
        )
    )


@router.post("/answers/{answer_id}/vote", response_model=VoteResponse)
async def vote_answer(
    answer_id: UUID,
    request: VoteAPIRequest,
    apply_vote_use_case: FromDishka[ApplyVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> VoteResponse:
    """Toggle the caller's vote on an answer."""
    identity = require_identity(
        jwt_service, auth_token, authorization, "Authentication required to vote"
    )
    return await apply_vote_use_case.execute(
        ApplyVoteRequest(
            votable_type=VotableType.ANSWER,
            votable_id=str(answer_id),
            user_id=str(identity.user_id),
            direction=request.direction,
        )
    )


@router.get("/questions/{question_id}/vote", response_model=VoteResponse)
async def get_question_vote_state(
    question_id: UUID,
    get_vote_state_use_case: FromDishka[GetVoteStateUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> VoteResponse:
    """Read vote totals for a question and the caller's direction."""
    identity = require_identity(jwt_service, auth_token, authorization)
    return await get_vote_state_use_case.execute(
        GetVoteStateRequest(
            votable_type=VotableType.QUESTION,
            votable_id=str(question_id),
            user_id=str(identity.user_id),
        )
    )


@router.get("/answers/{answer_id}/vote", response_model=VoteResponse)
async def get_answer_vote_state(
    answer_id: UUID,
    get_vote_state_use_case: FromDishka[GetVoteStateUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> VoteResponse:
    """Read vote totals for an answer and the caller's direction."""
    identity = require_identity(jwt_service, auth_token, authorization)
    return await get_vote_state_use_case.execute(
        GetVoteStateRequest(
            votable_type=VotableType.ANSWER,
            votable_id=str(answer_id),
            user_id=str(identity.user_id),
        )
    )
