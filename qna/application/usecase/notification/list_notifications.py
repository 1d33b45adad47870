"""List notifications use case."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from qna.domain.error import NotFoundError
from qna.domain.model import Notification
from qna.domain.repository import UserRepository
from qna.domain.service import ContentService, NotificationService
from qna.domain.value import NotificationKind, UserId

EXCERPT_LENGTH = 120


class NotificationItem(BaseModel):
    """Notification item in response."""

    notification_id: str
    kind: NotificationKind
    sender_id: str
    sender_username: Optional[str] = None
    question_id: Optional[str] = None
    answer_id: Optional[str] = None
    comment_id: Optional[str] = None
    question_title: Optional[str] = None
    excerpt: Optional[str] = None
    content_removed: bool = False
    read: bool
    read_at: Optional[datetime] = None
    created_at: datetime


class ListNotificationsRequest(BaseModel):
    """List notifications request."""

    user_id: str
    limit: Optional[int] = None
    offset: int = 0


class ListNotificationsResponse(BaseModel):
    """List notifications response."""

    notifications: list[NotificationItem]
    total: int
    unread_count: int
    limit: int
    offset: int


class ListNotificationsUseCase:
    """Use case for the poll path: a page of notifications, newest first.

    References to questions, answers and comments are weak. A reference to
    content that no longer exists (or was soft-deleted) is reported as
    `content_removed` instead of failing the listing. A sender without a
    user record lists with no `sender_username`.
    """

    def __init__(
        self,
        notification_service: NotificationService,
        content_service: ContentService,
        user_repository: UserRepository,
    ) -> None:
        """Initialize list notifications use case.

        Args:
            notification_service: Notification domain service
            content_service: Content domain service for resolving references
            user_repository: User repository for resolving senders
        """
        self.notification_service = notification_service
        self.content_service = content_service
        self.user_repository = user_repository

    async def execute(
        self, request: ListNotificationsRequest
    ) -> ListNotificationsResponse:
        page = await self.notification_service.list_for_recipient(
            recipient_id=UserId(UUID(request.user_id)),
            limit=request.limit,
            offset=request.offset,
        )

        usernames: dict[UserId, Optional[str]] = {}
        for sender_id in {notification.sender_id for notification in page.items}:
            sender = await self.user_repository.find_by_id(sender_id)
            usernames[sender_id] = sender.username if sender else None

        items = [
            await self._to_item(notification, usernames[notification.sender_id])
            for notification in page.items
        ]

        return ListNotificationsResponse(
            notifications=items,
            total=page.total,
            unread_count=page.unread_count,
            limit=page.limit,
            offset=page.offset,
        )

    async def _to_item(
        self, notification: Notification, sender_username: Optional[str]
    ) -> NotificationItem:
        refs = notification.refs
        question_title: Optional[str] = None
        excerpt: Optional[str] = None
        removed = False

        try:
            if refs.question_id:
                question = await self.content_service.get_question(refs.question_id)
                question_title = question.title
            if refs.answer_id:
                answer = await self.content_service.get_answer(refs.answer_id)
                excerpt = answer.content
            if refs.comment_id:
                comment = await self.content_service.get_comment(refs.comment_id)
                excerpt = comment.text
        except NotFoundError:
            removed = True
            question_title = None
            excerpt = None

        return NotificationItem(
            notification_id=str(notification.id),
            kind=notification.kind,
            sender_id=str(notification.sender_id),
            sender_username=sender_username,
            question_id=str(refs.question_id) if refs.question_id else None,
            answer_id=str(refs.answer_id) if refs.answer_id else None,
            comment_id=str(refs.comment_id) if refs.comment_id else None,
            question_title=question_title,
            excerpt=excerpt[:EXCERPT_LENGTH] if excerpt else None,
            content_removed=removed,
            read=notification.read,
            read_at=notification.read_at,
            created_at=notification.created_at,
        )
