"""Domain services."""

from .acceptance_service import AcceptanceOutcome, AcceptanceService
from .base import Service
from .content_service import ContentService, Votable
from .jwt_service import JWTService
from .notification_service import NotificationService
from .push import PushChannel, mailbox_key, question_room
from .reputation_service import ReputationService
from .user_service import UserService
from .vote_service import VoteService, parse_direction

__all__ = [
    "AcceptanceOutcome",
    "AcceptanceService",
    "ContentService",
    "JWTService",
    "NotificationService",
    "PushChannel",
    "ReputationService",
    "Service",
    "UserService",
    "Votable",
    "VoteService",
    "mailbox_key",
    "parse_direction",
    "question_room",
]
