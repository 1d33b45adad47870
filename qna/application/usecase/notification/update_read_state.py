"""Read-state use cases: mark one read/unread, mark all read."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from qna.application.usecase.base import BaseUseCase
from qna.domain.model import Notification
from qna.domain.service import NotificationService
from qna.domain.value import NotificationId, UserId


class UpdateReadStateRequest(BaseModel):
    """Mark read/unread request."""

    notification_id: str
    user_id: str  # Must be the recipient
    read: bool = True


class ReadStateResponse(BaseModel):
    """Read state of one notification."""

    notification_id: str
    read: bool
    read_at: Optional[datetime] = None

    @classmethod
    def from_notification(cls, notification: Notification) -> "ReadStateResponse":
        return cls(
            notification_id=str(notification.id),
            read=notification.read,
            read_at=notification.read_at,
        )


class UpdateReadStateUseCase(BaseUseCase[UpdateReadStateRequest, ReadStateResponse]):
    """Use case for marking one notification read or unread."""

    def __init__(self, notification_service: NotificationService) -> None:
        """Initialize read-state use case.

        Args:
            notification_service: Notification domain service
        """
        self.notification_service = notification_service

    async def execute(self, request: UpdateReadStateRequest) -> ReadStateResponse:
        """Execute the transition.

        Raises:
            NotFoundError: If the notification does not exist
            ForbiddenError: If the user is not the recipient
        """
        notification_id = NotificationId(UUID(request.notification_id))
        user_id = UserId(UUID(request.user_id))

        if request.read:
            notification = await self.notification_service.mark_read(
                notification_id, user_id
            )
        else:
            notification = await self.notification_service.mark_unread(
                notification_id, user_id
            )
        return ReadStateResponse.from_notification(notification)


class MarkAllReadRequest(BaseModel):
    """Mark all read request."""

    user_id: str


class MarkAllReadResponse(BaseModel):
    """Mark all read response."""

    updated: int
    unread_count: int


class MarkAllReadUseCase:
    """Use case for marking every notification of the caller read."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: MarkAllReadRequest) -> MarkAllReadResponse:
        user_id = UserId(UUID(request.user_id))
        updated = await self.notification_service.mark_all_read(user_id)
        unread = await self.notification_service.unread_count(user_id)
        return MarkAllReadResponse(updated=updated, unread_count=unread)
