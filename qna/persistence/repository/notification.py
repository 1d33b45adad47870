"""PostgreSQL implementation of Notification repository."""

from datetime import datetime
from typing import Optional

import logfire
from sqlalchemy import and_, delete, func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from qna.domain.error import InfrastructureError
from qna.domain.model import Notification
from qna.domain.repository import NotificationRepository
from qna.domain.value import NotificationId, UserId
from qna.persistence.mappers import notification_to_dict, row_to_notification
from qna.persistence.tables import notifications_table


class PostgresNotificationRepository(NotificationRepository):
    """PostgreSQL implementation of NotificationRepository.

    Writes on the fan-out path run inside a SAVEPOINT: a failed insert rolls
    back to the savepoint and leaves the surrounding vote or acceptance
    intact. Driver errors surface as `InfrastructureError`.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, notification_id: NotificationId) -> Optional[Notification]:
        stmt = select(notifications_table).where(
            notifications_table.c.id == notification_id
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_notification(dict(row)) if row else None

    async def save(self, notification: Notification) -> Notification:
        """Insert a new notification or update its read state."""
        values = notification_to_dict(notification)
        try:
            async with self.session.begin_nested():
                exists = await self.session.execute(
                    select(notifications_table.c.id).where(
                        notifications_table.c.id == notification.id
                    )
                )
                if exists.first():
                    stmt = (
                        update(notifications_table)
                        .where(notifications_table.c.id == notification.id)
                        .values(read=notification.read, read_at=notification.read_at)
                    )
                else:
                    stmt = notifications_table.insert().values(**values)
                await self.session.execute(stmt)
        except SQLAlchemyError as e:
            logfire.error(
                "Notification write failed",
                notification_id=str(notification.id),
                error=str(e),
            )
            raise InfrastructureError("Could not store notification") from e
        return notification

    async def prune(self, recipient_id: UserId, keep: int) -> int:
        """Delete everything past the newest `keep` rows, by insertion order."""
        stale = (
            select(notifications_table.c.id)
            .where(notifications_table.c.recipient_id == recipient_id)
            .order_by(notifications_table.c.seq.desc())
            .offset(keep)
        )
        stmt = delete(notifications_table).where(
            notifications_table.c.id.in_(stale.scalar_subquery())
        )
        try:
            async with self.session.begin_nested():
                result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise InfrastructureError("Could not prune notifications") from e
        return result.rowcount or 0  # type: ignore[attr-defined]

    async def find_by_recipient(
        self, recipient_id: UserId, limit: int, offset: int
    ) -> list[Notification]:
        stmt = (
            select(notifications_table)
            .where(notifications_table.c.recipient_id == recipient_id)
            .order_by(notifications_table.c.seq.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_notification(dict(row)) for row in result.mappings().all()]

    async def count_by_recipient(self, recipient_id: UserId) -> int:
        stmt = select(func.count()).where(
            notifications_table.c.recipient_id == recipient_id
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def count_unread(self, recipient_id: UserId) -> int:
        stmt = select(func.count()).where(
            and_(
                notifications_table.c.recipient_id == recipient_id,
                notifications_table.c.read.is_(False),
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def mark_all_read(self, recipient_id: UserId, read_at: datetime) -> int:
        stmt = (
            update(notifications_table)
            .where(notifications_table.c.recipient_id == recipient_id)
            .where(notifications_table.c.read.is_(False))
            .values(read=True, read_at=read_at)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount or 0  # type: ignore[attr-defined]

    async def delete(self, notification_id: NotificationId) -> bool:
        stmt = delete(notifications_table).where(
            notifications_table.c.id == notification_id
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
