"""Post answer use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from qna.domain.service import ContentService
from qna.domain.value import Identity, QuestionId, UserId, UserRole


class PostAnswerRequest(BaseModel):
    """Post answer request."""

    question_id: str
    content: str
    user_id: str
    role: UserRole = UserRole.USER


class PostAnswerResponse(BaseModel):
    """Post answer response."""

    answer_id: str
    question_id: str
    author_id: str
    is_accepted: bool
    created_at: datetime


class PostAnswerUseCase:
    """Use case for answering a question."""

    def __init__(self, content_service: ContentService) -> None:
        self.content_service = content_service

    async def execute(self, request: PostAnswerRequest) -> PostAnswerResponse:
        """Execute post answer flow.

        Raises:
            NotFoundError: If the question does not exist or is deleted
            ValidationError: If the content is empty
        """
        answer = await self.content_service.post_answer(
            question_id=QuestionId(UUID(request.question_id)),
            author=Identity(user_id=UserId(UUID(request.user_id)), role=request.role),
            content=request.content,
        )
        return PostAnswerResponse(
            answer_id=str(answer.id),
            question_id=str(answer.question_id),
            author_id=str(answer.author_id),
            is_accepted=answer.is_accepted,
            created_at=answer.created_at,
        )
