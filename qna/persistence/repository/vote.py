"""PostgreSQL implementation of Vote repository."""

from uuid import UUID

from sqlalchemy import and_, delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from qna.domain.model import VoteRecord, VoteToggle
from qna.domain.repository import VoteRepository
from qna.domain.value import UserId, VotableType, VoteDirection
from qna.persistence.tables import answers_table, questions_table, votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository.

    Each user's vote is one row in `votes`; the unique constraint on
    (user_id, votable_type, votable_id) keeps a user out of both sets.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_record(
        self, votable_type: VotableType, votable_id: UUID
    ) -> VoteRecord:
        stmt = select(votes_table.c.user_id, votes_table.c.vote_type).where(
            and_(
                votes_table.c.votable_type == votable_type.value,
                votes_table.c.votable_id == votable_id,
            )
        )
        result = await self.session.execute(stmt)
        upvoters: set[UserId] = set()
        downvoters: set[UserId] = set()
        for row in result.all():
            if row.vote_type == VoteDirection.UP.value:
                upvoters.add(UserId(row.user_id))
            else:
                downvoters.add(UserId(row.user_id))
        return VoteRecord(upvoters=frozenset(upvoters), downvoters=frozenset(downvoters))

    async def toggle(
        self,
        votable_type: VotableType,
        votable_id: UUID,
        user_id: UserId,
        direction: VoteDirection,
    ) -> VoteToggle:
        """Toggle a vote under a row lock on the voted entity.

        Locking the question/answer row serializes concurrent toggles on
        the same entity, so the record read here is never stale.
        """
        entity_table = (
            questions_table if votable_type == VotableType.QUESTION else answers_table
        )
        lock = (
            select(entity_table.c.id)
            .where(entity_table.c.id == votable_id)
            .with_for_update()
        )
        await self.session.execute(lock)

        record = await self.find_record(votable_type, votable_id)
        result = record.toggle(user_id, direction)

        match_row = and_(
            votes_table.c.user_id == user_id,
            votes_table.c.votable_type == votable_type.value,
            votes_table.c.votable_id == votable_id,
        )
        if result.current is None:
            stmt = delete(votes_table).where(match_row)
        elif result.previous is None:
            stmt = insert(votes_table).values(
                user_id=user_id,
                votable_type=votable_type.value,
                votable_id=votable_id,
                vote_type=result.current.value,
            )
        else:
            stmt = (
                update(votes_table)
                .where(match_row)
                .values(vote_type=result.current.value)
            )

        await self.session.execute(stmt)
        await self.session.flush()
        return result
