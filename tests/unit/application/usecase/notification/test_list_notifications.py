"""Unit tests for ListNotificationsUseCase."""

from uuid import uuid4

import pytest

from qna.application.usecase.notification import (
    ListNotificationsRequest,
    ListNotificationsUseCase,
)
from qna.domain.model.common import utc_now
from qna.domain.repository import AnswerRepository, QuestionRepository, UserRepository
from qna.domain.service import NotificationService, VoteService
from qna.domain.value import NotificationKind, NotificationRefs, UserId, VotableType
from tests.conftest import make_answer, make_question, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestListNotificationsUseCase:
    """Tests for ListNotificationsUseCase."""

    @pytest.mark.asyncio
    async def test_items_resolve_question_title_and_excerpt(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ListNotificationsUseCase)
        vote_service = await unit_env.get(VoteService)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)

        alice = await make_user(user_repo)
        bob = await make_user(user_repo)
        question = await make_question(question_repo, alice, title="Why is the sky blue?")
        answer = await make_answer(answer_repo, question, bob, content="Rayleigh " * 40)
        await vote_service.apply_vote(VotableType.ANSWER, answer.id, alice.id, "up")

        # Act
        response = await use_case.execute(ListNotificationsRequest(user_id=str(bob.id)))

        # Assert
        assert response.total == 1
        assert response.unread_count == 1
        item = response.notifications[0]
        assert item.kind is NotificationKind.UPVOTE
        assert item.sender_id == str(alice.id)
        assert item.sender_username == alice.username
        assert item.question_title == "Why is the sky blue?"
        assert item.excerpt.startswith("Rayleigh")
        assert len(item.excerpt) <= 120
        assert item.content_removed is False

    @pytest.mark.asyncio
    async def test_deleted_question_lists_as_removed(self, unit_env):
        """A notification about deleted content still lists, marked removed."""
        use_case = await unit_env.get(ListNotificationsUseCase)
        vote_service = await unit_env.get(VoteService)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)

        alice = await make_user(user_repo)
        bob = await make_user(user_repo)
        question = await make_question(question_repo, alice)
        await vote_service.apply_vote(VotableType.QUESTION, question.id, bob.id, "up")
        await question_repo.soft_delete(question.id, utc_now())

        response = await use_case.execute(
            ListNotificationsRequest(user_id=str(alice.id))
        )

        assert response.total == 1
        item = response.notifications[0]
        assert item.content_removed is True
        assert item.question_title is None
        assert item.question_id == str(question.id)

    @pytest.mark.asyncio
    async def test_sender_without_user_record_lists_without_username(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ListNotificationsUseCase)
        notification_service = await unit_env.get(NotificationService)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)

        alice = await make_user(user_repo, "alice")
        bob = await make_user(user_repo, "bob")
        question = await make_question(question_repo, alice)
        refs = NotificationRefs(question_id=question.id)
        await notification_service.notify_best_effort(
            recipient_id=alice.id,
            sender_id=UserId(uuid4()),
            kind=NotificationKind.COMMENT,
            refs=refs,
        )
        await notification_service.notify_best_effort(
            recipient_id=alice.id,
            sender_id=bob.id,
            kind=NotificationKind.UPVOTE,
            refs=refs,
        )

        # Act
        response = await use_case.execute(
            ListNotificationsRequest(user_id=str(alice.id))
        )

        # Assert
        assert response.total == 2
        by_kind = {item.kind: item for item in response.notifications}
        assert by_kind[NotificationKind.COMMENT].sender_username is None
        assert by_kind[NotificationKind.COMMENT].content_removed is False
        assert by_kind[NotificationKind.UPVOTE].sender_username == "bob"
