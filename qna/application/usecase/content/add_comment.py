"""Add comment use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from qna.domain.service import ContentService
from qna.domain.value import CommentableType, Identity, UserId, UserRole


class AddCommentRequest(BaseModel):
    """Add comment request."""

    content_type: CommentableType
    content_id: str  # Question or answer UUID string
    text: str
    user_id: str
    role: UserRole = UserRole.USER


class AddCommentResponse(BaseModel):
    """Add comment response."""

    comment_id: str
    content_type: CommentableType
    content_id: str
    question_id: str
    author_id: str
    text: str
    created_at: datetime


class AddCommentUseCase:
    """Use case for commenting on a question or answer."""

    def __init__(self, content_service: ContentService) -> None:
        """Initialize add comment use case.

        Args:
            content_service: Content domain service
        """
        self.content_service = content_service

    async def execute(self, request: AddCommentRequest) -> AddCommentResponse:
        """Execute add comment flow.

        The content author is notified best-effort.

        Raises:
            NotFoundError: If the target does not exist or is deleted
            ValidationError: If the text is empty or too long
        """
        comment = await self.content_service.add_comment(
            content_type=request.content_type,
            content_id=UUID(request.content_id),
            author=Identity(user_id=UserId(UUID(request.user_id)), role=request.role),
            text=request.text,
        )
        return AddCommentResponse(
            comment_id=str(comment.id),
            content_type=comment.content_type,
            content_id=str(comment.content_id),
            question_id=str(comment.question_id),
            author_id=str(comment.author_id),
            text=comment.text,
            created_at=comment.created_at,
        )
