"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from qna.domain.model.comment import Comment
from qna.domain.value import CommentId


class CommentRepository(ABC):
    """Repository for Comment entity."""

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment."""
        pass
