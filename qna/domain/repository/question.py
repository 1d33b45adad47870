"""Question repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from qna.domain.model.question import Question
from qna.domain.value import AnswerId, QuestionId


class QuestionRepository(ABC):
    """Repository for Question aggregate."""

    @abstractmethod
    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID, including soft-deleted ones.

        Args:
            question_id: The question's unique identifier

        Returns:
            The question if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, question: Question) -> Question:
        """Save a question (create or update)."""
        pass

    @abstractmethod
    async def increment_answer_count(self, question_id: QuestionId) -> None:
        """Atomically increment the question's answer count by 1."""
        pass

    @abstractmethod
    async def decrement_answer_count(self, question_id: QuestionId) -> None:
        """Atomically decrement the question's answer count by 1 (minimum 0)."""
        pass

    @abstractmethod
    async def swap_accepted_answer(
        self, question_id: QuestionId, answer_id: Optional[AnswerId]
    ) -> Optional[AnswerId]:
        """Atomically replace the question's accepted answer.

        The read of the previous value and the write of the new one form a
        single unit; concurrent swaps on the same question are serialized.

        Args:
            question_id: The question's unique identifier
            answer_id: The newly accepted answer, or None to clear acceptance

        Returns:
            The previously accepted answer ID, if any
        """
        pass

    @abstractmethod
    async def soft_delete(self, question_id: QuestionId, deleted_at: datetime) -> bool:
        """Mark a question deleted.

        Returns:
            True if a live question was deleted, False otherwise
        """
        pass
