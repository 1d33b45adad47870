"""Get unread count use case."""

from uuid import UUID

from pydantic import BaseModel

from qna.domain.service import NotificationService
from qna.domain.value import UserId


class GetUnreadCountRequest(BaseModel):
    user_id: str


class UnreadCountResponse(BaseModel):
    unread_count: int


class GetUnreadCountUseCase:
    """Use case for the caller's unread notification count."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: GetUnreadCountRequest) -> UnreadCountResponse:
        count = await self.notification_service.unread_count(
            UserId(UUID(request.user_id))
        )
        return UnreadCountResponse(unread_count=count)
