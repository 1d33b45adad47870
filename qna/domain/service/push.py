"""Real-time push channel port.

The push channel is a best-effort hint on top of the persisted notification
store. Implementations must never raise from `publish` or `broadcast`.
"""

from abc import ABC, abstractmethod
from typing import Any

from qna.domain.value import QuestionId, SessionId, UserId

Payload = dict[str, Any]


def mailbox_key(user_id: UserId) -> str:
    """Channel key of a user's personal mailbox."""
    return f"user:{user_id}"


def question_room(question_id: QuestionId) -> str:
    """Room key for live updates scoped to one question."""
    return f"question:{question_id}"


class PushChannel(ABC):
    """Publish/subscribe primitive keyed by user identity and room."""

    @abstractmethod
    async def publish(self, user_id: UserId, payload: Payload) -> int:
        """Deliver a payload to every live session of a user.

        Args:
            user_id: Recipient
            payload: JSON-serializable message

        Returns:
            Number of sessions the payload reached
        """
        pass

    @abstractmethod
    async def broadcast(self, room_key: str, payload: Payload) -> int:
        """Deliver a payload to every session that joined a room."""
        pass

    @abstractmethod
    def subscribe(self, session_id: SessionId, user_id: UserId) -> None:
        """Attach an authenticated session to the user's mailbox.

        Raises:
            ForbiddenError: If the session has not been registered with an
                established identity
        """
        pass

    @abstractmethod
    def join_room(self, session_id: SessionId, room_key: str) -> None:
        pass

    @abstractmethod
    def leave_room(self, session_id: SessionId, room_key: str) -> None:
        pass

    @abstractmethod
    def disconnect(self, session_id: SessionId) -> None:
        """Forget a session and all of its subscriptions."""
        pass

    @abstractmethod
    def connection_count(self, user_id: UserId) -> int:
        """Number of live sessions subscribed to the user's mailbox."""
        pass
