"""Question aggregate root."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from qna.domain.model.common import DomainModel, utc_now
from qna.domain.value import AnswerId, QuestionId, UserId


class Question(DomainModel):
    """Question aggregate root.

    Acceptance state:
    - accepted_answer_id: at most one accepted answer at any time
    - answer_count: number of non-deleted answers referencing the question

    Votes are held in the vote ledger keyed by the question id.
    """

    id: QuestionId
    author_id: UserId
    title: str = Field(min_length=1, max_length=150)
    content: str = Field(min_length=1)
    answer_count: int = Field(default=0, ge=0)
    accepted_answer_id: Optional[AnswerId] = None
    created_at: datetime = Field(default_factory=utc_now)
    deleted_at: Optional[datetime] = None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    @property
    def has_answers(self) -> bool:
        return self.answer_count > 0

    @property
    def has_accepted_answer(self) -> bool:
        return self.accepted_answer_id is not None

    @property
    def question_id(self) -> QuestionId:
        """Question this content belongs to (itself)."""
        return self.id
