"""Accept answer use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from qna.application.usecase.base import BaseUseCase
from qna.domain.service import AcceptanceOutcome, AcceptanceService
from qna.domain.value import AnswerId, QuestionId, UserId


class AcceptAnswerRequest(BaseModel):
    """Accept answer request."""

    question_id: str
    answer_id: str
    user_id: str  # Must be the question author


class AcceptanceResponse(BaseModel):
    """Acceptance state of a question."""

    question_id: str
    accepted_answer_id: Optional[str] = None
    previous_answer_id: Optional[str] = None
    changed: bool

    @classmethod
    def from_outcome(cls, outcome: AcceptanceOutcome) -> "AcceptanceResponse":
        return cls(
            question_id=str(outcome.question_id),
            accepted_answer_id=(
                str(outcome.accepted_answer_id) if outcome.accepted_answer_id else None
            ),
            previous_answer_id=(
                str(outcome.previous_answer_id) if outcome.previous_answer_id else None
            ),
            changed=outcome.changed,
        )


class AcceptAnswerUseCase(BaseUseCase[AcceptAnswerRequest, AcceptanceResponse]):
    """Use case for accepting an answer to one's own question."""

    def __init__(self, acceptance_service: AcceptanceService) -> None:
        """Initialize accept answer use case.

        Args:
            acceptance_service: Acceptance domain service
        """
        self.acceptance_service = acceptance_service

    async def execute(self, request: AcceptAnswerRequest) -> AcceptanceResponse:
        """Execute accept answer flow.

        Raises:
            NotFoundError: If the question or answer does not exist
            ForbiddenError: If the user is not the question author
            InvalidReferenceError: If the answer belongs to another question
        """
        outcome = await self.acceptance_service.accept(
            question_id=QuestionId(UUID(request.question_id)),
            answer_id=AnswerId(UUID(request.answer_id)),
            acting_user_id=UserId(UUID(request.user_id)),
        )
        return AcceptanceResponse.from_outcome(outcome)
