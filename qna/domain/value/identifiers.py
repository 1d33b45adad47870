"""Strongly typed identifiers for Q&A domain entities.

Using NewType keeps question, answer and notification IDs from being mixed up
at call sites even though they are all UUIDs at runtime.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
QuestionId = NewType("QuestionId", UUID)
AnswerId = NewType("AnswerId", UUID)
CommentId = NewType("CommentId", UUID)
NotificationId = NewType("NotificationId", UUID)
SessionId = NewType("SessionId", str)
