"""In-memory question repository for testing."""

from datetime import datetime
from typing import Optional

from qna.domain.model.question import Question
from qna.domain.repository.question import QuestionRepository
from qna.domain.value import AnswerId, QuestionId


class InMemoryQuestionRepository(QuestionRepository):
    """In-memory implementation of QuestionRepository for testing."""

    def __init__(self) -> None:
        self._questions: dict[QuestionId, Question] = {}

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        return self._questions.get(question_id)

    async def save(self, question: Question) -> Question:
        existing = self._questions.get(question.id)
        if existing:
            question = question.model_copy(
                update={
                    "answer_count": existing.answer_count,
                    "accepted_answer_id": existing.accepted_answer_id,
                }
            )
        self._questions[question.id] = question
        return question

    async def increment_answer_count(self, question_id: QuestionId) -> None:
        self._update(question_id, lambda q: {"answer_count": q.answer_count + 1})

    async def decrement_answer_count(self, question_id: QuestionId) -> None:
        self._update(question_id, lambda q: {"answer_count": max(q.answer_count - 1, 0)})

    async def swap_accepted_answer(
        self, question_id: QuestionId, answer_id: Optional[AnswerId]
    ) -> Optional[AnswerId]:
        question = self._questions.get(question_id)
        if not question:
            return None
        previous = question.accepted_answer_id
        self._questions[question_id] = question.model_copy(
            update={"accepted_answer_id": answer_id}
        )
        return previous

    async def soft_delete(self, question_id: QuestionId, deleted_at: datetime) -> bool:
        question = self._questions.get(question_id)
        if not question or question.is_deleted:
            return False
        self._questions[question_id] = question.model_copy(
            update={"deleted_at": deleted_at}
        )
        return True

    def _update(self, question_id: QuestionId, changes) -> None:
        question = self._questions.get(question_id)
        if question:
            self._questions[question_id] = question.model_copy(update=changes(question))
