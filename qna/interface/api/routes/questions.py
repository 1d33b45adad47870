"""Question, answer and comment routes.

Only the writes the voting, acceptance and notification flows depend on.
"""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, status
from pydantic import BaseModel, Field

from qna.application.usecase.content import (
    AddCommentRequest,
    AddCommentResponse,
    AddCommentUseCase,
    CreateQuestionRequest,
    CreateQuestionResponse,
    CreateQuestionUseCase,
    DeleteAnswerUseCase,
    DeleteContentRequest,
    DeleteContentResponse,
    DeleteQuestionUseCase,
    PostAnswerRequest,
    PostAnswerResponse,
    PostAnswerUseCase,
)
from qna.domain.service import JWTService
from qna.domain.value import CommentableType
from qna.interface.api.auth import require_identity

router = APIRouter(tags=["questions"], route_class=DishkaRoute)


class CreateQuestionAPIRequest(BaseModel):
    """API request for asking a question."""

    title: str = Field(min_length=1, max_length=150)
    content: str = Field(min_length=1)


class PostAnswerAPIRequest(BaseModel):
    """API request for answering a question."""

    content: str = Field(min_length=1)


class AddCommentAPIRequest(BaseModel):
    """API request for commenting on a question or answer."""

    content_type: CommentableType
    content_id: UUID
    text: str = Field(min_length=1, max_length=1000)


@router.post(
    "/questions",
    response_model=CreateQuestionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_question(
    request: CreateQuestionAPIRequest,
    create_question_use_case: FromDishka[CreateQuestionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> CreateQuestionResponse:
    """Ask a new question. Requires authentication."""
    identity = require_identity(
        jwt_service, auth_token, authorization, "Authentication required to ask"
    )
    return await create_question_use_case.execute(
        CreateQuestionRequest(
            title=request.title,
            content=request.content,
            user_id=str(identity.user_id),
            role=identity.role,
        )
    )


@router.delete("/questions/{question_id}", response_model=DeleteContentResponse)
async def delete_question(
    question_id: UUID,
    delete_question_use_case: FromDishka[DeleteQuestionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> DeleteContentResponse:
    """Soft-delete a question (author or moderator)."""
    identity = require_identity(jwt_service, auth_token, authorization)
    return await delete_question_use_case.execute(
        DeleteContentRequest(
            content_id=str(question_id),
            user_id=str(identity.user_id),
            role=identity.role,
        )
    )


@router.post(
    "/questions/{question_id}/answers",
    response_model=PostAnswerResponse,
    status_code=status.HTTP_201_CREATED,
)
async def post_answer(
    question_id: UUID,
    request: PostAnswerAPIRequest,
    post_answer_use_case: FromDishka[PostAnswerUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> PostAnswerResponse:
    """Answer a question. Requires authentication."""
    identity = require_identity(
        jwt_service, auth_token, authorization, "Authentication required to answer"
    )
    return await post_answer_use_case.execute(
        PostAnswerRequest(
            question_id=str(question_id),
            content=request.content,
            user_id=str(identity.user_id),
            role=identity.role,
        )
    )


@router.delete("/answers/{answer_id}", response_model=DeleteContentResponse)
async def delete_answer(
    answer_id: UUID,
    delete_answer_use_case: FromDishka[DeleteAnswerUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> DeleteContentResponse:
    """Soft-delete an answer (author or moderator).

    Deleting the accepted answer clears the question's acceptance.
    """
    identity = require_identity(jwt_service, auth_token, authorization)
    return await delete_answer_use_case.execute(
        DeleteContentRequest(
            content_id=str(answer_id),
            user_id=str(identity.user_id),
            role=identity.role,
        )
    )


@router.post(
    "/comments",
    response_model=AddCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_comment(
    request: AddCommentAPIRequest,
    add_comment_use_case: FromDishka[AddCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> AddCommentResponse:
    """Comment on a question or answer. The content author is notified."""
    identity = require_identity(
        jwt_service, auth_token, authorization, "Authentication required to comment"
    )
    return await add_comment_use_case.execute(
        AddCommentRequest(
            content_type=request.content_type,
            content_id=str(request.content_id),
            text=request.text,
            user_id=str(identity.user_id),
            role=identity.role,
        )
    )
