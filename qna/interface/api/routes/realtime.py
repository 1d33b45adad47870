"""WebSocket push endpoint.

Clients connect to `/ws` with a JWT in the `token` query parameter or the
`auth_token` cookie. The token is verified before the socket is accepted;
an unauthenticated client is closed with 1008 and never subscribed.

Client messages (JSON):
    {"action": "join-question", "question_id": "<uuid>"}
    {"action": "leave-question", "question_id": "<uuid>"}
    {"action": "ping"}

Server events: `connected`, `notification`, `vote.updated`,
`answer.accepted`, `joined`, `left`, `pong`, `error`.

A session whose push fails or stalls is dropped by the hub and closed with
1013; the client reconnects and refetches its inbox.
"""

from functools import partial
import json
from uuid import UUID, uuid4

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Cookie, Query, WebSocket, WebSocketDisconnect, status
import logfire
from starlette.websockets import WebSocketState

from qna.adapter.realtime.hub import ConnectionHub
from qna.domain.error import ForbiddenError
from qna.domain.service import JWTService, question_room
from qna.domain.value import Identity, QuestionId, SessionId

router = APIRouter(tags=["realtime"])


@router.websocket("/ws")
@inject
async def push_socket(
    websocket: WebSocket,
    hub: FromDishka[ConnectionHub],
    jwt_service: FromDishka[JWTService],
    token: str | None = Query(default=None),
    auth_token: str | None = Cookie(default=None),
) -> None:
    """Live push channel for notifications and question rooms."""
    identity = jwt_service.get_identity_from_token(token or auth_token)
    if not identity:
        logfire.info("WebSocket rejected: no valid token")
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return

    await websocket.accept()
    session_id = SessionId(uuid4().hex)
    hub.register(
        session_id,
        identity.user_id,
        websocket.send_json,
        close=partial(websocket.close, code=status.WS_1013_TRY_AGAIN_LATER),
    )
    hub.subscribe(session_id, identity.user_id)
    logfire.info(
        "WebSocket connected", session_id=session_id, user_id=str(identity.user_id)
    )

    try:
        await websocket.send_json(
            {"type": "connected", "user_id": str(identity.user_id)}
        )
        # The hub unregisters (and closes) sessions whose pushes fail
        while hub.is_registered(session_id):
            raw = await websocket.receive_text()
            await _handle_message(websocket, hub, session_id, identity, raw)
    except WebSocketDisconnect:
        logfire.debug("WebSocket closed by client", session_id=session_id)
    finally:
        hub.disconnect(session_id)


async def _reply(websocket: WebSocket, payload: dict) -> None:
    if websocket.application_state == WebSocketState.CONNECTED:
        await websocket.send_json(payload)


async def _handle_message(
    websocket: WebSocket,
    hub: ConnectionHub,
    session_id: SessionId,
    identity: Identity,
    raw: str,
) -> None:
    try:
        message = json.loads(raw)
    except ValueError:
        await _reply(websocket, {"type": "error", "detail": "Malformed JSON"})
        return
    if not isinstance(message, dict):
        await _reply(websocket, {"type": "error", "detail": "Expected an object"})
        return

    action = message.get("action")
    if action == "ping":
        await _reply(websocket, {"type": "pong"})
        return

    if action in ("join-question", "leave-question"):
        try:
            question_id = QuestionId(UUID(str(message.get("question_id"))))
        except ValueError:
            await _reply(websocket, {"type": "error", "detail": "Invalid question_id"})
            return

        room = question_room(question_id)
        if action == "join-question":
            try:
                hub.join_room(session_id, room)
            except ForbiddenError:
                logfire.debug("Join after session was dropped", session_id=session_id)
                await _reply(websocket, {"type": "error", "detail": "Session closed"})
                return
            await _reply(websocket, {"type": "joined", "room": room})
        else:
            hub.leave_room(session_id, room)
            await _reply(websocket, {"type": "left", "room": room})
        logfire.debug(
            "Room membership changed",
            action=action,
            room=room,
            user_id=str(identity.user_id),
        )
        return

    await _reply(websocket, {"type": "error", "detail": f"Unknown action: {action}"})
