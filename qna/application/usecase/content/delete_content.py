"""Delete question and delete answer use cases."""

from uuid import UUID

from pydantic import BaseModel

from qna.domain.service import AcceptanceService, ContentService
from qna.domain.value import AnswerId, Identity, QuestionId, UserId, UserRole


class DeleteContentRequest(BaseModel):
    """Delete question/answer request."""

    content_id: str  # Question or answer UUID string
    user_id: str
    role: UserRole = UserRole.USER

    def identity(self) -> Identity:
        return Identity(user_id=UserId(UUID(self.user_id)), role=self.role)


class DeleteContentResponse(BaseModel):
    """Delete question/answer response."""

    success: bool
    message: str


class DeleteQuestionUseCase:
    """Use case for soft-deleting a question.

    Notifications pointing at the question are kept; they list as removed
    content.
    """

    def __init__(self, content_service: ContentService) -> None:
        """Initialize delete question use case.

        Args:
            content_service: Content domain service
        """
        self.content_service = content_service

    async def execute(self, request: DeleteContentRequest) -> DeleteContentResponse:
        """Execute delete question flow.

        Raises:
            NotFoundError: If the question does not exist or is deleted
            ForbiddenError: If the user is neither author nor moderator
        """
        await self.content_service.delete_question(
            QuestionId(UUID(request.content_id)), request.identity()
        )
        return DeleteContentResponse(success=True, message="Question deleted")


class DeleteAnswerUseCase:
    """Use case for soft-deleting an answer.

    Deleting the accepted answer clears the question's acceptance and
    revokes the acceptance bonus.
    """

    def __init__(
        self,
        content_service: ContentService,
        acceptance_service: AcceptanceService,
    ) -> None:
        """Initialize delete answer use case.

        Args:
            content_service: Content domain service
            acceptance_service: Acceptance domain service
        """
        self.content_service = content_service
        self.acceptance_service = acceptance_service

    async def execute(self, request: DeleteContentRequest) -> DeleteContentResponse:
        """Execute delete answer flow.

        Raises:
            NotFoundError: If the answer does not exist or is deleted
            ForbiddenError: If the user is neither author nor moderator
        """
        answer = await self.content_service.delete_answer(
            AnswerId(UUID(request.content_id)), request.identity()
        )
        if answer.is_accepted:
            await self.acceptance_service.clear_acceptance(answer)
        return DeleteContentResponse(success=True, message="Answer deleted")
