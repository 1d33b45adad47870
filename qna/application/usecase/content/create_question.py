"""Create question use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from qna.domain.service import ContentService
from qna.domain.value import Identity, UserId, UserRole


class CreateQuestionRequest(BaseModel):
    """Create question request."""

    title: str
    content: str
    user_id: str
    role: UserRole = UserRole.USER


class CreateQuestionResponse(BaseModel):
    """Create question response."""

    question_id: str
    author_id: str
    title: str
    answer_count: int
    created_at: datetime


class CreateQuestionUseCase:
    """Use case for asking a question."""

    def __init__(self, content_service: ContentService) -> None:
        """Initialize create question use case.

        Args:
            content_service: Content domain service
        """
        self.content_service = content_service

    async def execute(self, request: CreateQuestionRequest) -> CreateQuestionResponse:
        """Execute create question flow.

        Raises:
            ValidationError: If the title or content is empty or too long
        """
        author = Identity(user_id=UserId(UUID(request.user_id)), role=request.role)
        question = await self.content_service.create_question(
            author=author, title=request.title, content=request.content
        )
        return CreateQuestionResponse(
            question_id=str(question.id),
            author_id=str(question.author_id),
            title=question.title,
            answer_count=question.answer_count,
            created_at=question.created_at,
        )
