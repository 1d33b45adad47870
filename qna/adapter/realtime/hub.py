"""In-process connection hub for real-time push.

Tracks live WebSocket sessions per user mailbox (`user:{id}`) and per
question room (`question:{id}`). One hub lives for the whole application;
with several worker processes each process only reaches its own sessions,
which is acceptable because pushes are hints on top of the notification
store.
"""

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Optional

import logfire

from qna.config import RealtimeSettings
from qna.domain.error import ForbiddenError
from qna.domain.service.push import Payload, PushChannel, mailbox_key
from qna.domain.value import SessionId, UserId

Sender = Callable[[Payload], Awaitable[None]]
Closer = Callable[[], Awaitable[None]]


@dataclass
class Session:
    """A connected client whose identity was verified at connect time."""

    id: SessionId
    user_id: UserId
    send: Sender
    close: Optional[Closer] = None
    channels: set[str] = field(default_factory=set)


class ConnectionHub(PushChannel):
    """Publish/subscribe over live sessions, keyed by mailbox and room."""

    def __init__(self, settings: RealtimeSettings) -> None:
        """Initialize the hub.

        Args:
            settings: Push timeouts
        """
        self.settings = settings
        self._sessions: dict[SessionId, Session] = {}
        self._channels: dict[str, set[SessionId]] = {}

    def register(
        self,
        session_id: SessionId,
        user_id: UserId,
        send: Sender,
        close: Optional[Closer] = None,
    ) -> Session:
        """Record a session whose identity has been established.

        Registration is what makes `subscribe` and `join_room` legal for the
        session. `close` is awaited when the hub drops the session after a
        failed or stalled send.
        """
        session = Session(id=session_id, user_id=user_id, send=send, close=close)
        self._sessions[session_id] = session
        logfire.debug("Session registered", session_id=session_id, user_id=str(user_id))
        return session

    def subscribe(self, session_id: SessionId, user_id: UserId) -> None:
        session = self._sessions.get(session_id)
        if not session or session.user_id != user_id:
            raise ForbiddenError("subscribe", "mailbox", str(user_id), str(user_id))
        self._add(session, mailbox_key(user_id))

    def join_room(self, session_id: SessionId, room_key: str) -> None:
        session = self._sessions.get(session_id)
        if not session:
            raise ForbiddenError("join", "room", room_key, session_id)
        self._add(session, room_key)

    def leave_room(self, session_id: SessionId, room_key: str) -> None:
        session = self._sessions.get(session_id)
        if session:
            self._remove(session, room_key)

    def disconnect(self, session_id: SessionId) -> None:
        session = self._sessions.pop(session_id, None)
        if not session:
            return
        for channel in list(session.channels):
            self._remove(session, channel)
        logfire.debug("Session disconnected", session_id=session_id)

    def connection_count(self, user_id: UserId) -> int:
        return len(self._channels.get(mailbox_key(user_id), ()))

    def session_count(self) -> int:
        return len(self._sessions)

    def is_registered(self, session_id: SessionId) -> bool:
        return session_id in self._sessions

    async def publish(self, user_id: UserId, payload: Payload) -> int:
        return await self._deliver(mailbox_key(user_id), payload)

    async def broadcast(self, room_key: str, payload: Payload) -> int:
        return await self._deliver(room_key, payload)

    async def _deliver(self, channel: str, payload: Payload) -> int:
        """Send to every session on a channel; failures drop and close the session.

        Returns:
            Number of sessions the payload reached
        """
        sessions = [
            self._sessions[sid]
            for sid in self._channels.get(channel, ())
            if sid in self._sessions
        ]
        if not sessions:
            return 0

        results = await asyncio.gather(
            *(self._send(session, payload) for session in sessions),
            return_exceptions=True,
        )

        delivered = 0
        dropped = []
        for session, result in zip(sessions, results):
            if isinstance(result, BaseException):
                logfire.debug(
                    "Push send failed, dropping session",
                    session_id=session.id,
                    channel=channel,
                    error=str(result) or type(result).__name__,
                )
                self.disconnect(session.id)
                dropped.append(session)
            else:
                delivered += 1

        if dropped:
            await asyncio.gather(*(self._close(session) for session in dropped))
        return delivered

    async def _send(self, session: Session, payload: Payload) -> None:
        await asyncio.wait_for(
            session.send(payload), timeout=self.settings.send_timeout_seconds
        )

    async def _close(self, session: Session) -> None:
        if session.close is None:
            return
        try:
            await asyncio.wait_for(
                session.close(), timeout=self.settings.send_timeout_seconds
            )
        except Exception as e:
            logfire.debug(
                "Closing dropped session failed",
                session_id=session.id,
                error=str(e) or type(e).__name__,
            )

    def _add(self, session: Session, channel: str) -> None:
        self._channels.setdefault(channel, set()).add(session.id)
        session.channels.add(channel)

    def _remove(self, session: Session, channel: str) -> None:
        members = self._channels.get(channel)
        if members is not None:
            members.discard(session.id)
            if not members:
                del self._channels[channel]
        session.channels.discard(channel)
