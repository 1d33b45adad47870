"""Answer entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from qna.domain.model.common import DomainModel, utc_now
from qna.domain.value import AnswerId, QuestionId, UserId


class Answer(DomainModel):
    """Answer to a question.

    The accepted flag mirrors `Question.accepted_answer_id`: at most one
    answer per question is accepted.
    """

    id: AnswerId
    question_id: QuestionId
    author_id: UserId
    content: str = Field(min_length=1)
    is_accepted: bool = False
    accepted_at: Optional[datetime] = None
    accepted_by: Optional[UserId] = None
    created_at: datetime = Field(default_factory=utc_now)
    deleted_at: Optional[datetime] = None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None
