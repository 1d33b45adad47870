"""Acceptance domain service."""

from typing import Optional

import logfire

from qna.config import ReputationSettings
from qna.domain.error import ForbiddenError, InvalidReferenceError
from qna.domain.model import Answer, Question
from qna.domain.model.common import DomainModel, utc_now
from qna.domain.repository import AnswerRepository, QuestionRepository
from qna.domain.value import (
    AnswerId,
    NotificationKind,
    NotificationRefs,
    QuestionId,
    UserId,
)

from .base import Service
from .content_service import ContentService
from .notification_service import NotificationService
from .push import PushChannel, question_room
from .reputation_service import ReputationService


class AcceptanceOutcome(DomainModel):
    """Acceptance state of a question after an accept/unaccept call."""

    question_id: QuestionId
    accepted_answer_id: Optional[AnswerId] = None
    previous_answer_id: Optional[AnswerId] = None
    changed: bool = False


class AcceptanceService(Service):
    """Tracks the single accepted answer of each question.

    Business rules:
    - Only the question author may accept or unaccept
    - At most one accepted answer per question; accepting another answer
      unmarks the previous one and revokes its bonus
    - The answer author gains `accept_bonus` reputation, except when
      accepting their own answer
    """

    def __init__(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        content_service: ContentService,
        reputation_service: ReputationService,
        notification_service: NotificationService,
        push_channel: PushChannel,
        reputation_settings: ReputationSettings,
    ) -> None:
        """Initialize acceptance service.

        Args:
            question_repository: Question repository
            answer_repository: Answer repository
            content_service: Content domain service (lookups)
            reputation_service: Reputation domain service
            notification_service: Notification domain service
            push_channel: Real-time channel for question rooms
            reputation_settings: Acceptance bonus configuration
        """
        self.question_repository = question_repository
        self.answer_repository = answer_repository
        self.content_service = content_service
        self.reputation_service = reputation_service
        self.notification_service = notification_service
        self.push_channel = push_channel
        self.reputation_settings = reputation_settings

    async def accept(
        self, question_id: QuestionId, answer_id: AnswerId, acting_user_id: UserId
    ) -> AcceptanceOutcome:
        """Accept an answer to a question.

        Re-accepting the currently accepted answer is a no-op.

        Args:
            question_id: Question being resolved
            answer_id: Answer to accept
            acting_user_id: User performing the action

        Returns:
            Acceptance outcome

        Raises:
            NotFoundError: If the question or answer does not exist or is deleted
            ForbiddenError: If the acting user is not the question author
            InvalidReferenceError: If the answer belongs to another question
        """
        with logfire.span(
            "acceptance_service.accept",
            question_id=str(question_id),
            answer_id=str(answer_id),
            user_id=str(acting_user_id),
        ):
            question = await self.content_service.get_question(question_id)
            answer = await self.content_service.get_answer(answer_id)
            self._ensure_owner(question, acting_user_id, "accept")

            if answer.question_id != question.id:
                logfire.warn(
                    "Answer does not belong to question",
                    question_id=str(question_id),
                    answer_id=str(answer_id),
                )
                raise InvalidReferenceError(
                    "Answer", str(answer_id), "Question", str(question_id)
                )

            if question.accepted_answer_id == answer.id:
                return AcceptanceOutcome(
                    question_id=question.id, accepted_answer_id=answer.id
                )

            previous_id = await self.question_repository.swap_accepted_answer(
                question.id, answer.id
            )
            if previous_id == answer.id:
                # A concurrent request accepted the same answer first.
                return AcceptanceOutcome(
                    question_id=question.id, accepted_answer_id=answer.id
                )
            if previous_id:
                await self._revoke(question, previous_id)

            await self.answer_repository.mark_accepted(
                answer.id, accepted_by=acting_user_id, accepted_at=utc_now()
            )
            if answer.author_id != acting_user_id:
                await self.reputation_service.adjust(
                    answer.author_id, self.reputation_settings.accept_bonus
                )

            logfire.info(
                "Answer accepted",
                question_id=str(question.id),
                answer_id=str(answer.id),
                previous_answer_id=str(previous_id) if previous_id else None,
            )

            await self.notification_service.notify_best_effort(
                recipient_id=answer.author_id,
                sender_id=acting_user_id,
                kind=NotificationKind.ACCEPTED,
                refs=NotificationRefs(question_id=question.id, answer_id=answer.id),
            )

            outcome = AcceptanceOutcome(
                question_id=question.id,
                accepted_answer_id=answer.id,
                previous_answer_id=previous_id,
                changed=True,
            )
            await self._broadcast(outcome)
            return outcome

    async def unaccept(
        self, question_id: QuestionId, acting_user_id: UserId
    ) -> AcceptanceOutcome:
        """Clear a question's accepted answer.

        Raises:
            NotFoundError: If the question does not exist or is deleted
            ForbiddenError: If the acting user is not the question author
        """
        with logfire.span(
            "acceptance_service.unaccept",
            question_id=str(question_id),
            user_id=str(acting_user_id),
        ):
            question = await self.content_service.get_question(question_id)
            self._ensure_owner(question, acting_user_id, "unaccept")

            if not question.has_accepted_answer:
                return AcceptanceOutcome(question_id=question.id)

            previous_id = await self.question_repository.swap_accepted_answer(
                question.id, None
            )
            if not previous_id:
                return AcceptanceOutcome(question_id=question.id)

            await self._revoke(question, previous_id)
            logfire.info(
                "Acceptance cleared",
                question_id=str(question.id),
                answer_id=str(previous_id),
            )

            outcome = AcceptanceOutcome(
                question_id=question.id, previous_answer_id=previous_id, changed=True
            )
            await self._broadcast(outcome)
            return outcome

    async def clear_acceptance(self, answer: Answer) -> bool:
        """Clear the acceptance pointing at `answer`, if any.

        Called when an answer is deleted so the question never points at
        deleted content.

        Returns:
            True if an acceptance was cleared
        """
        question = await self.question_repository.find_by_id(answer.question_id)
        if not question or question.accepted_answer_id != answer.id:
            return False

        with logfire.span(
            "acceptance_service.clear_acceptance",
            question_id=str(question.id),
            answer_id=str(answer.id),
        ):
            previous_id = await self.question_repository.swap_accepted_answer(
                question.id, None
            )
            if not previous_id:
                return False
            await self._revoke(question, previous_id)

            await self._broadcast(
                AcceptanceOutcome(
                    question_id=question.id,
                    previous_answer_id=previous_id,
                    changed=True,
                )
            )
            return True

    def _ensure_owner(self, question: Question, user_id: UserId, action: str) -> None:
        if question.author_id != user_id:
            logfire.warn(
                "Acceptance denied",
                question_id=str(question.id),
                user_id=str(user_id),
                action=action,
            )
            raise ForbiddenError(action, "question", str(question.id), str(user_id))

    async def _revoke(self, question: Question, answer_id: AnswerId) -> None:
        """Unmark a previously accepted answer and take back its bonus."""
        await self.answer_repository.clear_accepted(answer_id)

        previous = await self.answer_repository.find_by_id(answer_id)
        # The bonus was only granted when the answer author was not the acceptor
        if previous and previous.author_id != question.author_id:
            await self.reputation_service.adjust(
                previous.author_id, -self.reputation_settings.accept_bonus
            )

    async def _broadcast(self, outcome: AcceptanceOutcome) -> None:
        payload = {"type": "answer.accepted", "data": outcome.model_dump(mode="json")}
        try:
            await self.push_channel.broadcast(question_room(outcome.question_id), payload)
        except Exception as e:
            logfire.debug("Room broadcast failed", error=str(e))
