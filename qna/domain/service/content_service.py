"""Content domain service.

Questions, answers and comments are owned by the content store; this service
is the thin slice of it the voting and notification core reads from and the
few writes that keep `answer_count` and comment notifications consistent.
"""

from typing import Union
from uuid import UUID, uuid4

import logfire

from qna.domain.error import ForbiddenError, NotFoundError, ValidationError
from qna.domain.model import Answer, Comment, Question
from qna.domain.model.common import utc_now
from qna.domain.repository import (
    AnswerRepository,
    CommentRepository,
    QuestionRepository,
)
from qna.domain.value import (
    AnswerId,
    CommentableType,
    CommentId,
    Identity,
    NotificationKind,
    NotificationRefs,
    QuestionId,
    VotableType,
)

from .base import Service
from .notification_service import NotificationService
from .user_service import UserService

Votable = Union[Question, Answer]


class ContentService(Service):
    """Domain service for question, answer and comment operations."""

    def __init__(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        comment_repository: CommentRepository,
        notification_service: NotificationService,
        user_service: UserService,
    ) -> None:
        """Initialize content service.

        Args:
            question_repository: Question repository
            answer_repository: Answer repository
            comment_repository: Comment repository
            notification_service: Notification domain service
            user_service: User domain service (author lookup)
        """
        self.question_repository = question_repository
        self.answer_repository = answer_repository
        self.comment_repository = comment_repository
        self.notification_service = notification_service
        self.user_service = user_service

    async def get_question(self, question_id: QuestionId) -> Question:
        """Get a live (not soft-deleted) question.

        Raises:
            NotFoundError: If the question does not exist or is deleted
        """
        question = await self.question_repository.find_by_id(question_id)
        if not question or question.is_deleted:
            logfire.warn("Question not found", question_id=str(question_id))
            raise NotFoundError("Question", str(question_id))
        return question

    async def get_answer(self, answer_id: AnswerId) -> Answer:
        """Get a live (not soft-deleted) answer.

        Raises:
            NotFoundError: If the answer does not exist or is deleted
        """
        answer = await self.answer_repository.find_by_id(answer_id)
        if not answer or answer.is_deleted:
            logfire.warn("Answer not found", answer_id=str(answer_id))
            raise NotFoundError("Answer", str(answer_id))
        return answer

    async def get_votable(self, votable_type: VotableType, votable_id: UUID) -> Votable:
        """Get a live question or answer by type.

        Questions and answers expose the same capabilities to the vote
        ledger: `author_id`, `question_id` and `is_deleted`.
        """
        if votable_type == VotableType.QUESTION:
            return await self.get_question(QuestionId(votable_id))
        return await self.get_answer(AnswerId(votable_id))

    async def create_question(
        self, author: Identity, title: str, content: str
    ) -> Question:
        """Create a question authored by a registered user.

        Raises:
            NotFoundError: If the author has no user record
            ValidationError: If the title or content is empty
        """
        with logfire.span("content_service.create_question", author_id=str(author.user_id)):
            await self.user_service.get_by_id(author.user_id)
            try:
                question = Question(
                    id=QuestionId(uuid4()),
                    author_id=author.user_id,
                    title=title,
                    content=content,
                )
            except ValueError as e:
                raise ValidationError(str(e)) from e
            saved = await self.question_repository.save(question)
            logfire.info("Question created", question_id=str(saved.id))
            return saved

    async def post_answer(
        self, question_id: QuestionId, author: Identity, content: str
    ) -> Answer:
        """Post an answer and bump the question's answer count.

        Raises:
            NotFoundError: If the author has no user record, or the question
                does not exist or is deleted
            ValidationError: If the content is empty
        """
        with logfire.span(
            "content_service.post_answer",
            question_id=str(question_id),
            author_id=str(author.user_id),
        ):
            await self.user_service.get_by_id(author.user_id)
            await self.get_question(question_id)
            try:
                answer = Answer(
                    id=AnswerId(uuid4()),
                    question_id=question_id,
                    author_id=author.user_id,
                    content=content,
                )
            except ValueError as e:
                raise ValidationError(str(e)) from e

            saved = await self.answer_repository.save(answer)
            await self.question_repository.increment_answer_count(question_id)
            logfire.info(
                "Answer posted", answer_id=str(saved.id), question_id=str(question_id)
            )
            return saved

    async def delete_question(self, question_id: QuestionId, actor: Identity) -> None:
        """Soft-delete a question.

        Raises:
            NotFoundError: If the question does not exist or is deleted
            ForbiddenError: If the actor is neither the author nor a moderator
        """
        with logfire.span(
            "content_service.delete_question",
            question_id=str(question_id),
            user_id=str(actor.user_id),
        ):
            question = await self.get_question(question_id)
            if question.author_id != actor.user_id and not actor.is_moderator:
                raise ForbiddenError(
                    "delete", "question", str(question_id), str(actor.user_id)
                )
            await self.question_repository.soft_delete(question_id, utc_now())
            logfire.info("Question deleted", question_id=str(question_id))

    async def delete_answer(self, answer_id: AnswerId, actor: Identity) -> Answer:
        """Soft-delete an answer and decrement the question's answer count.

        Clearing an acceptance that points at the answer is the caller's job
        (see `AcceptanceService.clear_acceptance`).

        Returns:
            The answer as it was before deletion

        Raises:
            NotFoundError: If the answer does not exist or is deleted
            ForbiddenError: If the actor is neither the author nor a moderator
        """
        with logfire.span(
            "content_service.delete_answer",
            answer_id=str(answer_id),
            user_id=str(actor.user_id),
        ):
            answer = await self.get_answer(answer_id)
            if answer.author_id != actor.user_id and not actor.is_moderator:
                raise ForbiddenError("delete", "answer", str(answer_id), str(actor.user_id))

            deleted = await self.answer_repository.soft_delete(answer_id, utc_now())
            if deleted:
                await self.question_repository.decrement_answer_count(answer.question_id)
                logfire.info(
                    "Answer deleted",
                    answer_id=str(answer_id),
                    question_id=str(answer.question_id),
                )
            return answer

    async def get_comment(self, comment_id: CommentId) -> Comment:
        comment = await self.comment_repository.find_by_id(comment_id)
        if not comment or comment.is_deleted:
            raise NotFoundError("Comment", str(comment_id))
        return comment

    async def add_comment(
        self,
        content_type: CommentableType,
        content_id: UUID,
        author: Identity,
        text: str,
    ) -> Comment:
        """Comment on a question or answer and notify its author.

        The notification is best-effort and suppressed when users comment on
        their own content.

        Raises:
            NotFoundError: If the author has no user record, or the target
                does not exist or is deleted
            ValidationError: If the text is empty or too long
        """
        with logfire.span(
            "content_service.add_comment",
            content_type=content_type.value,
            content_id=str(content_id),
            author_id=str(author.user_id),
        ):
            await self.user_service.get_by_id(author.user_id)
            target = await self.get_votable(VotableType(content_type.value), content_id)
            try:
                comment = Comment(
                    id=CommentId(uuid4()),
                    content_type=content_type,
                    content_id=content_id,
                    question_id=target.question_id,
                    author_id=author.user_id,
                    text=text,
                )
            except ValueError as e:
                raise ValidationError(str(e)) from e

            saved = await self.comment_repository.save(comment)
            logfire.info("Comment added", comment_id=str(saved.id))

            await self.notification_service.notify_best_effort(
                recipient_id=target.author_id,
                sender_id=author.user_id,
                kind=NotificationKind.COMMENT,
                refs=NotificationRefs(
                    question_id=target.question_id,
                    answer_id=target.id if isinstance(target, Answer) else None,
                    comment_id=saved.id,
                ),
            )
            return saved
