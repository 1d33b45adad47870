"""Domain value objects for the Q&A core."""

from qna.domain.value.identifiers import (
    AnswerId,
    CommentId,
    NotificationId,
    QuestionId,
    SessionId,
    UserId,
)
from qna.domain.value.types import (
    CommentableType,
    Identity,
    NotificationKind,
    NotificationRefs,
    UserRole,
    VotableType,
    VoteDirection,
)

__all__ = [
    # Identifiers
    "UserId",
    "QuestionId",
    "AnswerId",
    "CommentId",
    "NotificationId",
    "SessionId",
    # Types
    "VoteDirection",
    "VotableType",
    "CommentableType",
    "Identity",
    "NotificationKind",
    "NotificationRefs",
    "UserRole",
]
