"""Notification domain service."""

from typing import Optional
from uuid import uuid4

import logfire

from qna.config import NotificationSettings
from qna.domain.error import ForbiddenError, NotFoundError
from qna.domain.model import Notification, NotificationPage
from qna.domain.model.common import utc_now
from qna.domain.repository import NotificationRepository
from qna.domain.value import (
    NotificationId,
    NotificationKind,
    NotificationRefs,
    UserId,
)

from .base import Service
from .push import PushChannel


class NotificationService(Service):
    """Creates, trims and transitions notifications.

    Business rules:
    - Never notify a user about their own action
    - Keep at most `retention_cap` notifications per recipient
    - Only the recipient may read, unread or delete a notification
    - The push channel is told about every new notification, best-effort
    """

    def __init__(
        self,
        notification_repository: NotificationRepository,
        push_channel: PushChannel,
        settings: NotificationSettings,
    ) -> None:
        """Initialize notification service.

        Args:
            notification_repository: Notification repository
            push_channel: Real-time channel for live sessions
            settings: Retention and paging configuration
        """
        self.notification_repository = notification_repository
        self.push_channel = push_channel
        self.settings = settings

    async def notify(
        self,
        recipient_id: UserId,
        sender_id: UserId,
        kind: NotificationKind,
        refs: Optional[NotificationRefs] = None,
    ) -> Optional[Notification]:
        """Create a notification unless the sender is the recipient.

        Args:
            recipient_id: User to notify
            sender_id: User whose action triggered the notification
            kind: Notification kind
            refs: Question/answer/comment the notification is about

        Returns:
            The persisted notification, or None when suppressed

        Raises:
            InfrastructureError: If the notification could not be stored
        """
        if recipient_id == sender_id:
            logfire.debug(
                "Self-notification suppressed", user_id=str(sender_id), kind=kind.value
            )
            return None

        with logfire.span(
            "notification_service.notify",
            recipient_id=str(recipient_id),
            sender_id=str(sender_id),
            kind=kind.value,
        ):
            notification = Notification(
                id=NotificationId(uuid4()),
                recipient_id=recipient_id,
                sender_id=sender_id,
                kind=kind,
                refs=refs or NotificationRefs(),
                created_at=utc_now(),
            )
            saved = await self.notification_repository.save(notification)

            evicted = await self.notification_repository.prune(
                recipient_id, keep=self.settings.retention_cap
            )
            if evicted:
                logfire.info(
                    "Old notifications evicted",
                    recipient_id=str(recipient_id),
                    evicted=evicted,
                )

            logfire.info(
                "Notification created",
                notification_id=str(saved.id),
                recipient_id=str(recipient_id),
                kind=kind.value,
            )

            await self._push(saved)
            return saved

    async def notify_best_effort(
        self,
        recipient_id: UserId,
        sender_id: UserId,
        kind: NotificationKind,
        refs: Optional[NotificationRefs] = None,
    ) -> Optional[Notification]:
        """Like `notify`, but log and absorb any failure.

        Used on the fan-out step of votes, acceptances and comments: the
        primary action succeeds even if the notification write fails.
        """
        try:
            return await self.notify(recipient_id, sender_id, kind, refs)
        except Exception as e:
            logfire.error(
                "Notification delivery failed",
                recipient_id=str(recipient_id),
                sender_id=str(sender_id),
                kind=kind.value,
                error=str(e),
                error_type=type(e).__name__,
            )
            return None

    async def mark_read(
        self, notification_id: NotificationId, requesting_user_id: UserId
    ) -> Notification:
        """Mark one of the requesting user's notifications read.

        Raises:
            NotFoundError: If the notification does not exist
            ForbiddenError: If the requesting user is not the recipient
        """
        with logfire.span(
            "notification_service.mark_read",
            notification_id=str(notification_id),
            user_id=str(requesting_user_id),
        ):
            notification = await self._get_owned(
                notification_id, requesting_user_id, "read"
            )
            if notification.read:
                return notification
            return await self.notification_repository.save(
                notification.mark_read(utc_now())
            )

    async def mark_unread(
        self, notification_id: NotificationId, requesting_user_id: UserId
    ) -> Notification:
        """Mark one of the requesting user's notifications unread again."""
        with logfire.span(
            "notification_service.mark_unread",
            notification_id=str(notification_id),
            user_id=str(requesting_user_id),
        ):
            notification = await self._get_owned(
                notification_id, requesting_user_id, "unread"
            )
            if not notification.read:
                return notification
            return await self.notification_repository.save(notification.mark_unread())

    async def mark_all_read(self, recipient_id: UserId) -> int:
        """Mark all of a recipient's unread notifications read.

        Every updated notification gets the same `read_at` timestamp.

        Returns:
            Number of notifications updated
        """
        with logfire.span(
            "notification_service.mark_all_read", recipient_id=str(recipient_id)
        ):
            updated = await self.notification_repository.mark_all_read(
                recipient_id, utc_now()
            )
            logfire.info(
                "Notifications marked read",
                recipient_id=str(recipient_id),
                updated=updated,
            )
            return updated

    async def delete(
        self, notification_id: NotificationId, requesting_user_id: UserId
    ) -> None:
        """Permanently delete one of the requesting user's notifications.

        Raises:
            NotFoundError: If the notification does not exist
            ForbiddenError: If the requesting user is not the recipient
        """
        with logfire.span(
            "notification_service.delete",
            notification_id=str(notification_id),
            user_id=str(requesting_user_id),
        ):
            await self._get_owned(notification_id, requesting_user_id, "delete")
            await self.notification_repository.delete(notification_id)
            logfire.info("Notification deleted", notification_id=str(notification_id))

    async def unread_count(self, recipient_id: UserId) -> int:
        return await self.notification_repository.count_unread(recipient_id)

    async def list_for_recipient(
        self,
        recipient_id: UserId,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> NotificationPage:
        """Fetch a page of a recipient's notifications, newest first.

        This is the poll path and the source of truth; pushes are hints.

        Args:
            recipient_id: Recipient
            limit: Page size (defaults and caps come from settings)
            offset: Number of notifications to skip

        Returns:
            Page with total and unread counts
        """
        limit = min(
            limit or self.settings.default_page_size, self.settings.max_page_size
        )
        offset = max(offset, 0)

        with logfire.span(
            "notification_service.list_for_recipient",
            recipient_id=str(recipient_id),
            limit=limit,
            offset=offset,
        ):
            items = await self.notification_repository.find_by_recipient(
                recipient_id, limit=limit, offset=offset
            )
            total = await self.notification_repository.count_by_recipient(recipient_id)
            unread = await self.notification_repository.count_unread(recipient_id)
            return NotificationPage(
                items=items,
                total=total,
                unread_count=unread,
                limit=limit,
                offset=offset,
            )

    async def _get_owned(
        self, notification_id: NotificationId, user_id: UserId, action: str
    ) -> Notification:
        notification = await self.notification_repository.find_by_id(notification_id)
        if not notification:
            logfire.warn("Notification not found", notification_id=str(notification_id))
            raise NotFoundError("Notification", str(notification_id))
        if notification.recipient_id != user_id:
            logfire.warn(
                "Notification access denied",
                notification_id=str(notification_id),
                user_id=str(user_id),
                action=action,
            )
            raise ForbiddenError(action, "notification", str(notification_id), str(user_id))
        return notification

    async def _push(self, notification: Notification) -> None:
        payload = {
            "type": "notification",
            "data": notification.model_dump(mode="json"),
        }
        try:
            await self.push_channel.publish(notification.recipient_id, payload)
        except Exception as e:
            logfire.debug(
                "Push failed, notification remains available by polling",
                notification_id=str(notification.id),
                error=str(e),
            )
