"""Domain model entities for the Q&A core."""

from qna.domain.model.answer import Answer
from qna.domain.model.comment import Comment
from qna.domain.model.notification import Notification, NotificationPage
from qna.domain.model.question import Question
from qna.domain.model.user import REPUTATION_FLOOR, User
from qna.domain.model.vote import VoteOutcome, VoteRecord, VoteToggle

__all__ = [
    "User",
    "Question",
    "Answer",
    "Comment",
    "Notification",
    "NotificationPage",
    "VoteRecord",
    "VoteToggle",
    "VoteOutcome",
    "REPUTATION_FLOOR",
]
