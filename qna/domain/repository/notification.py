"""Notification repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from qna.domain.model.notification import Notification
from qna.domain.value import NotificationId, UserId


class NotificationRepository(ABC):
    """Repository for Notification entity.

    Creation order is the insertion order; `prune` and `find_by_recipient`
    rely on it.
    """

    @abstractmethod
    async def find_by_id(self, notification_id: NotificationId) -> Optional[Notification]:
        """Find a notification by ID.

        Args:
            notification_id: The notification's unique identifier

        Returns:
            The notification if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, notification: Notification) -> Notification:
        """Save a notification (create or update).

        Raises:
            InfrastructureError: If the write fails
        """
        pass

    @abstractmethod
    async def prune(self, recipient_id: UserId, keep: int) -> int:
        """Delete a recipient's oldest notifications beyond the newest `keep`.

        Args:
            recipient_id: Recipient whose history is trimmed
            keep: Number of most recent notifications to retain

        Returns:
            Number of notifications deleted
        """
        pass

    @abstractmethod
    async def find_by_recipient(
        self, recipient_id: UserId, limit: int, offset: int
    ) -> list[Notification]:
        """Find a recipient's notifications, newest first."""
        pass

    @abstractmethod
    async def count_by_recipient(self, recipient_id: UserId) -> int:
        pass

    @abstractmethod
    async def count_unread(self, recipient_id: UserId) -> int:
        """Count a recipient's notifications with read=False."""
        pass

    @abstractmethod
    async def mark_all_read(self, recipient_id: UserId, read_at: datetime) -> int:
        """Mark every unread notification of a recipient read.

        Args:
            recipient_id: Recipient
            read_at: Timestamp stamped on every updated notification

        Returns:
            Number of notifications updated
        """
        pass

    @abstractmethod
    async def delete(self, notification_id: NotificationId) -> bool:
        """Permanently delete a notification.

        Returns:
            True if a notification was deleted, False if none existed
        """
        pass
