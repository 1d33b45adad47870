"""Vote domain service."""

from typing import Optional, Union
from uuid import UUID

import logfire

from qna.config import ReputationSettings
from qna.domain.error import ValidationError
from qna.domain.model import Answer, VoteOutcome
from qna.domain.repository import VoteRepository
from qna.domain.value import (
    NotificationKind,
    NotificationRefs,
    UserId,
    VotableType,
    VoteDirection,
)

from .base import Service
from .content_service import ContentService, Votable
from .notification_service import NotificationService
from .push import PushChannel, question_room
from .reputation_service import ReputationService
from .user_service import UserService


def parse_direction(direction: Union[VoteDirection, str]) -> VoteDirection:
    """Coerce a raw direction into a `VoteDirection`.

    Raises:
        ValidationError: If the direction is not "up" or "down"
    """
    if isinstance(direction, VoteDirection):
        return direction
    try:
        return VoteDirection(direction)
    except ValueError:
        raise ValidationError(f"Vote direction must be 'up' or 'down', got {direction!r}")


class VoteService(Service):
    """Domain service for vote operations.

    One implementation serves questions and answers alike: anything with an
    author and a vote record can be voted on.
    """

    def __init__(
        self,
        vote_repository: VoteRepository,
        content_service: ContentService,
        reputation_service: ReputationService,
        notification_service: NotificationService,
        push_channel: PushChannel,
        reputation_settings: ReputationSettings,
        user_service: UserService,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            content_service: Content domain service (target lookup)
            reputation_service: Reputation domain service
            notification_service: Notification domain service
            push_channel: Real-time channel for question rooms
            reputation_settings: Per-direction reputation deltas
            user_service: User domain service (voter lookup)
        """
        self.vote_repository = vote_repository
        self.content_service = content_service
        self.reputation_service = reputation_service
        self.notification_service = notification_service
        self.push_channel = push_channel
        self.reputation_settings = reputation_settings
        self.user_service = user_service

    async def apply_vote(
        self,
        votable_type: VotableType,
        votable_id: UUID,
        user_id: UserId,
        direction: Union[VoteDirection, str],
    ) -> VoteOutcome:
        """Cast, switch or retract a user's vote on a question or answer.

        Toggle semantics:
        - same direction as the user's current vote: the vote is retracted
        - otherwise: the vote is recorded and any opposite vote cleared

        The author's reputation follows the change. Casting (not retracting)
        a vote on someone else's content notifies the author.

        Args:
            votable_type: Question or answer
            votable_id: ID of the item
            user_id: Voting user
            direction: "up" or "down"

        Returns:
            Vote state after the action

        Raises:
            ValidationError: If the direction is malformed
            NotFoundError: If the voter has no user record, or the item does
                not exist or is deleted
        """
        direction = parse_direction(direction)

        with logfire.span(
            "vote_service.apply_vote",
            votable_type=votable_type.value,
            votable_id=str(votable_id),
            user_id=str(user_id),
            direction=direction.value,
        ):
            # Nothing is written until both ends of the vote are known users
            await self.user_service.get_by_id(user_id)
            target = await self.content_service.get_votable(votable_type, votable_id)
            if target.author_id != user_id:
                await self.user_service.get_by_id(target.author_id)

            toggle = await self.vote_repository.toggle(
                votable_type, votable_id, user_id, direction
            )
            logfire.info(
                "Vote applied",
                votable_type=votable_type.value,
                votable_id=str(votable_id),
                user_id=str(user_id),
                previous=toggle.previous.value if toggle.previous else None,
                current=toggle.current.value if toggle.current else None,
                score=toggle.record.score,
            )

            is_self_vote = target.author_id == user_id
            if not is_self_vote:
                delta = self._reputation_delta(toggle.previous, toggle.current)
                if delta:
                    await self.reputation_service.adjust(target.author_id, delta)

            if toggle.cast and not is_self_vote:
                await self.notification_service.notify_best_effort(
                    recipient_id=target.author_id,
                    sender_id=user_id,
                    kind=NotificationKind.for_vote(direction),
                    refs=self._refs(target),
                )

            outcome = VoteOutcome.from_record(
                votable_type, str(votable_id), toggle.record, user_id
            )
            await self._broadcast(target, outcome)
            return outcome

    async def get_vote_state(
        self, votable_type: VotableType, votable_id: UUID, user_id: UserId
    ) -> VoteOutcome:
        """Current vote state of an item as seen by `user_id`.

        Raises:
            NotFoundError: If the item does not exist or is deleted
        """
        with logfire.span(
            "vote_service.get_vote_state",
            votable_type=votable_type.value,
            votable_id=str(votable_id),
        ):
            await self.content_service.get_votable(votable_type, votable_id)
            record = await self.vote_repository.find_record(votable_type, votable_id)
            return VoteOutcome.from_record(
                votable_type, str(votable_id), record, user_id
            )

    def _reputation_delta(
        self,
        previous: Optional[VoteDirection],
        current: Optional[VoteDirection],
    ) -> int:
        """Reputation change for the author when a vote moves from previous to current."""
        return self._direction_value(current) - self._direction_value(previous)

    def _direction_value(self, direction: Optional[VoteDirection]) -> int:
        if direction is VoteDirection.UP:
            return self.reputation_settings.upvote_delta
        if direction is VoteDirection.DOWN:
            return self.reputation_settings.downvote_delta
        return 0

    @staticmethod
    def _refs(target: Votable) -> NotificationRefs:
        return NotificationRefs(
            question_id=target.question_id,
            answer_id=target.id if isinstance(target, Answer) else None,
        )

    async def _broadcast(self, target: Votable, outcome: VoteOutcome) -> None:
        # Room payloads carry counts only; a viewer's own vote is per-user state.
        payload = {
            "type": "vote.updated",
            "data": outcome.model_dump(mode="json", exclude={"user_vote"}),
        }
        try:
            await self.push_channel.broadcast(question_room(target.question_id), payload)
        except Exception as e:
            logfire.debug("Room broadcast failed", error=str(e))
