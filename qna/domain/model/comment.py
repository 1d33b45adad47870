"""Comment entity.

Comments hang off a question or an answer and exist here so comment
notifications have something to point at.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field

from qna.domain.model.common import DomainModel, utc_now
from qna.domain.value import CommentableType, CommentId, QuestionId, UserId


class Comment(DomainModel):
    """Comment on a question or answer."""

    id: CommentId
    content_type: CommentableType
    content_id: UUID  # QuestionId or AnswerId
    question_id: QuestionId
    author_id: UserId
    text: str = Field(min_length=1, max_length=1000)
    created_at: datetime = Field(default_factory=utc_now)
    deleted_at: Optional[datetime] = None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None
