"""In-memory notification repository for testing."""

from datetime import datetime
from typing import Optional

from qna.domain.model.notification import Notification
from qna.domain.repository.notification import NotificationRepository
from qna.domain.value import NotificationId, UserId


class InMemoryNotificationRepository(NotificationRepository):
    """In-memory implementation of NotificationRepository for testing.

    Notifications are kept in insertion order, oldest first.
    """

    def __init__(self) -> None:
        self._notifications: list[Notification] = []

    async def find_by_id(self, notification_id: NotificationId) -> Optional[Notification]:
        for notification in self._notifications:
            if notification.id == notification_id:
                return notification
        return None

    async def save(self, notification: Notification) -> Notification:
        for i, existing in enumerate(self._notifications):
            if existing.id == notification.id:
                self._notifications[i] = notification
                return notification
        self._notifications.append(notification)
        return notification

    async def prune(self, recipient_id: UserId, keep: int) -> int:
        owned = [n for n in self._notifications if n.recipient_id == recipient_id]
        stale = {n.id for n in owned[: max(len(owned) - keep, 0)]}
        if stale:
            self._notifications = [
                n for n in self._notifications if n.id not in stale
            ]
        return len(stale)

    async def find_by_recipient(
        self, recipient_id: UserId, limit: int, offset: int
    ) -> list[Notification]:
        owned = [n for n in reversed(self._notifications) if n.recipient_id == recipient_id]
        return owned[offset : offset + limit]

    async def count_by_recipient(self, recipient_id: UserId) -> int:
        return sum(1 for n in self._notifications if n.recipient_id == recipient_id)

    async def count_unread(self, recipient_id: UserId) -> int:
        return sum(
            1
            for n in self._notifications
            if n.recipient_id == recipient_id and not n.read
        )

    async def mark_all_read(self, recipient_id: UserId, read_at: datetime) -> int:
        updated = 0
        for i, notification in enumerate(self._notifications):
            if notification.recipient_id == recipient_id and not notification.read:
                self._notifications[i] = notification.mark_read(read_at)
                updated += 1
        return updated

    async def delete(self, notification_id: NotificationId) -> bool:
        before = len(self._notifications)
        self._notifications = [
            n for n in self._notifications if n.id != notification_id
        ]
        return len(self._notifications) < before
