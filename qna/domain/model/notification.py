"""Notification entity.

A notification records one fan-out event for a recipient. It references the
question/answer/comment involved by id only.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from qna.domain.model.common import DomainModel, utc_now
from qna.domain.value import (
    NotificationId,
    NotificationKind,
    NotificationRefs,
    UserId,
)


class Notification(DomainModel):
    """Notification for one recipient.

    Business rules:
    - recipient and sender are always different users
    - read/unread transitions are the only mutations
    """

    id: NotificationId
    recipient_id: UserId
    sender_id: UserId
    kind: NotificationKind
    refs: NotificationRefs = Field(default_factory=NotificationRefs)
    read: bool = False
    read_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=utc_now)

    @model_validator(mode="after")
    def validate_not_self(self) -> "Notification":
        """A user is never notified about their own action."""
        if self.recipient_id == self.sender_id:
            raise ValueError("Notification recipient and sender must differ")
        return self

    def mark_read(self, at: datetime) -> "Notification":
        return self.model_copy(update={"read": True, "read_at": at})

    def mark_unread(self) -> "Notification":
        return self.model_copy(update={"read": False, "read_at": None})


class NotificationPage(DomainModel):
    """One page of a recipient's notifications, newest first."""

    items: list[Notification]
    total: int = Field(ge=0)
    unread_count: int = Field(ge=0)
    limit: int
    offset: int
