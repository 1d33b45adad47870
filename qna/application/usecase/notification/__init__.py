"""Notification use cases."""

from .delete_notification import (
    DeleteNotificationRequest,
    DeleteNotificationResponse,
    DeleteNotificationUseCase,
)
from .get_unread_count import (
    GetUnreadCountRequest,
    GetUnreadCountUseCase,
    UnreadCountResponse,
)
from .list_notifications import (
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
    NotificationItem,
)
from .update_read_state import (
    MarkAllReadRequest,
    MarkAllReadResponse,
    MarkAllReadUseCase,
    ReadStateResponse,
    UpdateReadStateRequest,
    UpdateReadStateUseCase,
)

__all__ = [
    "DeleteNotificationRequest",
    "DeleteNotificationResponse",
    "DeleteNotificationUseCase",
    "GetUnreadCountRequest",
    "GetUnreadCountUseCase",
    "UnreadCountResponse",
    "ListNotificationsRequest",
    "ListNotificationsResponse",
    "ListNotificationsUseCase",
    "NotificationItem",
    "MarkAllReadRequest",
    "MarkAllReadResponse",
    "MarkAllReadUseCase",
    "ReadStateResponse",
    "UpdateReadStateRequest",
    "UpdateReadStateUseCase",
]
