"""Notification routes (the poll path).

Every route acts on the caller's own mailbox; touching another user's
notification is a 403.
"""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, Query

from qna.application.usecase.notification import (
    DeleteNotificationRequest,
    DeleteNotificationResponse,
    DeleteNotificationUseCase,
    GetUnreadCountRequest,
    GetUnreadCountUseCase,
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
    MarkAllReadRequest,
    MarkAllReadResponse,
    MarkAllReadUseCase,
    ReadStateResponse,
    UnreadCountResponse,
    UpdateReadStateRequest,
    UpdateReadStateUseCase,
)
from qna.domain.service import JWTService
from qna.interface.api.auth import require_identity

router = APIRouter(
    prefix="/notifications", tags=["notifications"], route_class=DishkaRoute
)


@router.get("", response_model=ListNotificationsResponse)
async def list_notifications(
    list_notifications_use_case: FromDishka[ListNotificationsUseCase],
    jwt_service: FromDishka[JWTService],
    limit: int | None = Query(default=None, ge=1),
    offset: int = Query(default=0, ge=0),
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ListNotificationsResponse:
    """List the caller's notifications, newest first.

    Args:
        list_notifications_use_case: List use case from DI
        jwt_service: JWT service for token verification (injected)
        limit: Page size (server default and maximum apply)
        offset: Number of notifications to skip
        auth_token: JWT token from cookie
        authorization: Optional bearer header

    Returns:
        One page plus total and unread counts
    """
    identity = require_identity(jwt_service, auth_token, authorization)
    return await list_notifications_use_case.execute(
        ListNotificationsRequest(
            user_id=str(identity.user_id), limit=limit, offset=offset
        )
    )


@router.get("/unread-count", response_model=UnreadCountResponse)
async def get_unread_count(
    get_unread_count_use_case: FromDishka[GetUnreadCountUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> UnreadCountResponse:
    identity = require_identity(jwt_service, auth_token, authorization)
    return await get_unread_count_use_case.execute(
        GetUnreadCountRequest(user_id=str(identity.user_id))
    )


@router.put("/read-all", response_model=MarkAllReadResponse)
async def mark_all_read(
    mark_all_read_use_case: FromDishka[MarkAllReadUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> MarkAllReadResponse:
    """Mark every notification of the caller read."""
    identity = require_identity(jwt_service, auth_token, authorization)
    return await mark_all_read_use_case.execute(
        MarkAllReadRequest(user_id=str(identity.user_id))
    )


@router.put("/{notification_id}/read", response_model=ReadStateResponse)
async def mark_read(
    notification_id: UUID,
    update_read_state_use_case: FromDishka[UpdateReadStateUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ReadStateResponse:
    identity = require_identity(jwt_service, auth_token, authorization)
    return await update_read_state_use_case.execute(
        UpdateReadStateRequest(
            notification_id=str(notification_id),
            user_id=str(identity.user_id),
            read=True,
        )
    )


@router.put("/{notification_id}/unread", response_model=ReadStateResponse)
async def mark_unread(
    notification_id: UUID,
    update_read_state_use_case: FromDishka[UpdateReadStateUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ReadStateResponse:
    identity = require_identity(jwt_service, auth_token, authorization)
    return await update_read_state_use_case.execute(
        UpdateReadStateRequest(
            notification_id=str(notification_id),
            user_id=str(identity.user_id),
            read=False,
        )
    )


@router.delete("/{notification_id}", response_model=DeleteNotificationResponse)
async def delete_notification(
    notification_id: UUID,
    delete_notification_use_case: FromDishka[DeleteNotificationUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> DeleteNotificationResponse:
    """Permanently delete one of the caller's notifications."""
    identity = require_identity(jwt_service, auth_token, authorization)
    return await delete_notification_use_case.execute(
        DeleteNotificationRequest(
            notification_id=str(notification_id), user_id=str(identity.user_id)
        )
    )
