"""Domain value types for the Q&A core.

Enumeration values are persisted and sent to clients, so they are part of
the wire contract.
"""

from enum import Enum
from typing import Optional

from qna.domain.value.common import ValueObject
from qna.domain.value.identifiers import AnswerId, CommentId, QuestionId, UserId


class VoteDirection(str, Enum):
    """Direction of a vote on a question or answer."""

    UP = "up"
    DOWN = "down"

    @property
    def opposite(self) -> "VoteDirection":
        """The other direction."""
        return VoteDirection.DOWN if self is VoteDirection.UP else VoteDirection.UP


class VotableType(str, Enum):
    """Type of entity that can be voted on."""

    QUESTION = "question"
    ANSWER = "answer"


class CommentableType(str, Enum):
    """Type of entity a comment can be attached to."""

    QUESTION = "question"
    ANSWER = "answer"


class NotificationKind(str, Enum):
    """Kind of notification.

    The set is fixed: clients switch on these exact values.
    """

    COMMENT = "comment"
    UPVOTE = "upvote"
    DOWNVOTE = "downvote"
    ACCEPTED = "accepted"

    @classmethod
    def for_vote(cls, direction: VoteDirection) -> "NotificationKind":
        """Notification kind emitted when a vote in `direction` is cast."""
        return cls.UPVOTE if direction is VoteDirection.UP else cls.DOWNVOTE


class UserRole(str, Enum):
    """Role supplied by the identity provider."""

    USER = "user"
    MODERATOR = "moderator"
    ADMIN = "admin"


class NotificationRefs(ValueObject):
    """Weak references from a notification to the content it describes.

    These are lookup-only: deleting the referenced content does not delete
    the notification.
    """

    question_id: Optional[QuestionId] = None
    answer_id: Optional[AnswerId] = None
    comment_id: Optional[CommentId] = None


class Identity(ValueObject):
    """Authenticated actor resolved by the identity provider.

    Passed explicitly into every operation; nothing reads it from ambient
    request state.
    """

    user_id: UserId
    role: UserRole = UserRole.USER

    @property
    def is_moderator(self) -> bool:
        return self.role in (UserRole.MODERATOR, UserRole.ADMIN)
