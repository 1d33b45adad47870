"""Delete notification use case."""

from uuid import UUID

from pydantic import BaseModel

from qna.domain.service import NotificationService
from qna.domain.value import NotificationId, UserId


class DeleteNotificationRequest(BaseModel):
    """Delete notification request."""

    notification_id: str
    user_id: str  # Must be the recipient


class DeleteNotificationResponse(BaseModel):
    """Delete notification response."""

    success: bool
    message: str


class DeleteNotificationUseCase:
    """Use case for permanently deleting one of the caller's notifications."""

    def __init__(self, notification_service: NotificationService) -> None:
        """Initialize delete notification use case.

        Args:
            notification_service: Notification domain service
        """
        self.notification_service = notification_service

    async def execute(
        self, request: DeleteNotificationRequest
    ) -> DeleteNotificationResponse:
        """Execute delete flow.

        Raises:
            NotFoundError: If the notification does not exist
            ForbiddenError: If the user is not the recipient
        """
        await self.notification_service.delete(
            NotificationId(UUID(request.notification_id)),
            UserId(UUID(request.user_id)),
        )
        return DeleteNotificationResponse(
            success=True, message="Notification deleted successfully"
        )
