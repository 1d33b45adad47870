"""In-memory comment repository for testing."""

from typing import Optional

from qna.domain.model.comment import Comment
from qna.domain.repository.comment import CommentRepository
from qna.domain.value import CommentId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        return self._comments.get(comment_id)

    async def save(self, comment: Comment) -> Comment:
        self._comments[comment.id] = comment
        return comment
