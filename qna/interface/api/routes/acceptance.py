"""Answer acceptance routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header
from pydantic import BaseModel

from qna.application.usecase.acceptance import (
    AcceptAnswerRequest,
    AcceptAnswerUseCase,
    AcceptanceResponse,
    UnacceptAnswerRequest,
    UnacceptAnswerUseCase,
)
from qna.domain.service import JWTService
from qna.interface.api.auth import require_identity

router = APIRouter(prefix="/questions", tags=["acceptance"], route_class=DishkaRoute)


class AcceptAnswerAPIRequest(BaseModel):
    """API request for accepting an answer."""

    answer_id: UUID


@router.post("/{question_id}/accept", response_model=AcceptanceResponse)
async def accept_answer(
    question_id: UUID,
    request: AcceptAnswerAPIRequest,
    accept_answer_use_case: FromDishka[AcceptAnswerUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> AcceptanceResponse:
    """Accept an answer to the caller's question.

    Accepting a different answer replaces the previous acceptance.
    Re-accepting the current answer returns `changed: false`.

    Args:
        question_id: Question UUID
        request: Answer to accept
        accept_answer_use_case: Accept answer use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie
        authorization: Optional bearer header

    Returns:
        Acceptance state of the question
    """
    identity = require_identity(
        jwt_service, auth_token, authorization, "Authentication required to accept"
    )
    return await accept_answer_use_case.execute(
        AcceptAnswerRequest(
            question_id=str(question_id),
            answer_id=str(request.answer_id),
            user_id=str(identity.user_id),
        )
    )


@router.delete("/{question_id}/accept", response_model=AcceptanceResponse)
async def unaccept_answer(
    question_id: UUID,
    unaccept_answer_use_case: FromDishka[UnacceptAnswerUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> AcceptanceResponse:
    """Clear the accepted answer of the caller's question."""
    identity = require_identity(jwt_service, auth_token, authorization)
    return await unaccept_answer_use_case.execute(
        UnacceptAnswerRequest(
            question_id=str(question_id), user_id=str(identity.user_id)
        )
    )
