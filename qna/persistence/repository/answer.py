"""PostgreSQL implementation of Answer repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from qna.domain.model import Answer
from qna.domain.repository import AnswerRepository
from qna.domain.value import AnswerId, UserId
from qna.persistence.mappers import answer_to_dict, row_to_answer
from qna.persistence.tables import answers_table


class PostgresAnswerRepository(AnswerRepository):
    """PostgreSQL implementation of AnswerRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        stmt = select(answers_table).where(answers_table.c.id == answer_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_answer(dict(row)) if row else None

    async def save(self, answer: Answer) -> Answer:
        """Save an answer (create or update content)."""
        existing = await self.find_by_id(answer.id)

        if existing:
            stmt = (
                answers_table.update()
                .where(answers_table.c.id == answer.id)
                .values(content=answer.content)
            )
        else:
            stmt = answers_table.insert().values(**answer_to_dict(answer))

        await self.session.execute(stmt)
        await self.session.flush()
        return answer

    async def mark_accepted(
        self, answer_id: AnswerId, accepted_by: UserId, accepted_at: datetime
    ) -> None:
        stmt = (
            answers_table.update()
            .where(answers_table.c.id == answer_id)
            .values(is_accepted=True, accepted_at=accepted_at, accepted_by=accepted_by)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def clear_accepted(self, answer_id: AnswerId) -> None:
        stmt = (
            answers_table.update()
            .where(answers_table.c.id == answer_id)
            .values(is_accepted=False, accepted_at=None, accepted_by=None)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def soft_delete(self, answer_id: AnswerId, deleted_at: datetime) -> bool:
        stmt = (
            answers_table.update()
            .where(answers_table.c.id == answer_id)
            .where(answers_table.c.deleted_at.is_(None))
            .values(deleted_at=deleted_at)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
