"""Answer repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from qna.domain.model.answer import Answer
from qna.domain.value import AnswerId, UserId


class AnswerRepository(ABC):
    """Repository for Answer entity."""

    @abstractmethod
    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID, including soft-deleted ones.

        Args:
            answer_id: The answer's unique identifier

        Returns:
            The answer if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, answer: Answer) -> Answer:
        """Save an answer (create or update)."""
        pass

    @abstractmethod
    async def mark_accepted(
        self, answer_id: AnswerId, accepted_by: UserId, accepted_at: datetime
    ) -> None:
        """Set the accepted flag, acceptance time and acceptor."""
        pass

    @abstractmethod
    async def clear_accepted(self, answer_id: AnswerId) -> None:
        """Clear the accepted flag, acceptance time and acceptor."""
        pass

    @abstractmethod
    async def soft_delete(self, answer_id: AnswerId, deleted_at: datetime) -> bool:
        """Mark an answer deleted.

        Returns:
            True if a live answer was deleted, False otherwise
        """
        pass
