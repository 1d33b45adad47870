"""PostgreSQL implementation of Question repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import case, select
from sqlalchemy.ext.asyncio import AsyncSession

from qna.domain.model import Question
from qna.domain.repository import QuestionRepository
from qna.domain.value import AnswerId, QuestionId
from qna.persistence.mappers import question_to_dict, row_to_question
from qna.persistence.tables import questions_table


class PostgresQuestionRepository(QuestionRepository):
    """PostgreSQL implementation of QuestionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        stmt = select(questions_table).where(questions_table.c.id == question_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_question(dict(row)) if row else None

    async def save(self, question: Question) -> Question:
        """Save a question (create or update).

        Counters and the accepted pointer are excluded from updates; they
        have their own atomic operations.
        """
        existing = await self.find_by_id(question.id)
        question_dict = question_to_dict(question)

        if existing:
            for key in ("answer_count", "accepted_answer_id"):
                question_dict.pop(key)
            stmt = (
                questions_table.update()
                .where(questions_table.c.id == question.id)
                .values(**question_dict)
            )
        else:
            stmt = questions_table.insert().values(**question_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return question

    async def increment_answer_count(self, question_id: QuestionId) -> None:
        """Atomically increment answer count by 1."""
        stmt = (
            questions_table.update()
            .where(questions_table.c.id == question_id)
            .values(answer_count=questions_table.c.answer_count + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def decrement_answer_count(self, question_id: QuestionId) -> None:
        """Atomically decrement answer count by 1 (minimum 0)."""
        stmt = (
            questions_table.update()
            .where(questions_table.c.id == question_id)
            .values(
                answer_count=case(
                    (questions_table.c.answer_count > 0, questions_table.c.answer_count - 1),
                    else_=0,
                )
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def swap_accepted_answer(
        self, question_id: QuestionId, answer_id: Optional[AnswerId]
    ) -> Optional[AnswerId]:
        """Replace the accepted answer under a row lock.

        The lock is held until the request transaction ends, so concurrent
        acceptances on the same question run one after another.
        """
        lock = (
            select(questions_table.c.accepted_answer_id)
            .where(questions_table.c.id == question_id)
            .with_for_update()
        )
        result = await self.session.execute(lock)
        previous = result.scalar_one_or_none()

        stmt = (
            questions_table.update()
            .where(questions_table.c.id == question_id)
            .values(accepted_answer_id=answer_id)
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return AnswerId(previous) if previous else None

    async def soft_delete(self, question_id: QuestionId, deleted_at: datetime) -> bool:
        stmt = (
            questions_table.update()
            .where(questions_table.c.id == question_id)
            .where(questions_table.c.deleted_at.is_(None))
            .values(deleted_at=deleted_at)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
