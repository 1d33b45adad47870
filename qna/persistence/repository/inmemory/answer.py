"""In-memory answer repository for testing."""

from datetime import datetime
from typing import Optional

from qna.domain.model.answer import Answer
from qna.domain.repository.answer import AnswerRepository
from qna.domain.value import AnswerId, UserId


class InMemoryAnswerRepository(AnswerRepository):
    """In-memory implementation of AnswerRepository for testing."""

    def __init__(self) -> None:
        self._answers: dict[AnswerId, Answer] = {}

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        return self._answers.get(answer_id)

    async def save(self, answer: Answer) -> Answer:
        self._answers[answer.id] = answer
        return answer

    async def mark_accepted(
        self, answer_id: AnswerId, accepted_by: UserId, accepted_at: datetime
    ) -> None:
        answer = self._answers.get(answer_id)
        if answer:
            self._answers[answer_id] = answer.model_copy(
                update={
                    "is_accepted": True,
                    "accepted_at": accepted_at,
                    "accepted_by": accepted_by,
                }
            )

    async def clear_accepted(self, answer_id: AnswerId) -> None:
        answer = self._answers.get(answer_id)
        if answer:
            self._answers[answer_id] = answer.model_copy(
                update={"is_accepted": False, "accepted_at": None, "accepted_by": None}
            )

    async def soft_delete(self, answer_id: AnswerId, deleted_at: datetime) -> bool:
        answer = self._answers.get(answer_id)
        if not answer or answer.is_deleted:
            return False
        self._answers[answer_id] = answer.model_copy(update={"deleted_at": deleted_at})
        return True
