"""Unaccept answer use case."""

from uuid import UUID

from pydantic import BaseModel

from qna.application.usecase.acceptance.accept_answer import AcceptanceResponse
from qna.domain.service import AcceptanceService
from qna.domain.value import QuestionId, UserId


class UnacceptAnswerRequest(BaseModel):
    """Unaccept answer request."""

    question_id: str
    user_id: str


class UnacceptAnswerUseCase:
    """Use case for clearing a question's accepted answer."""

    def __init__(self, acceptance_service: AcceptanceService) -> None:
        self.acceptance_service = acceptance_service

    async def execute(self, request: UnacceptAnswerRequest) -> AcceptanceResponse:
        outcome = await self.acceptance_service.unaccept(
            question_id=QuestionId(UUID(request.question_id)),
            acting_user_id=UserId(UUID(request.user_id)),
        )
        return AcceptanceResponse.from_outcome(outcome)
