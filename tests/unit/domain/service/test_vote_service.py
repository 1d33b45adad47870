"""Unit tests for VoteService."""

import asyncio
from uuid import uuid4

import pytest

from qna.adapter.realtime.hub import ConnectionHub
from qna.config import NotificationSettings, RealtimeSettings, ReputationSettings
from qna.domain.error import InfrastructureError, NotFoundError, ValidationError
from qna.domain.model import Notification
from qna.domain.model.common import utc_now
from qna.domain.repository import (
    AnswerRepository,
    NotificationRepository,
    QuestionRepository,
    UserRepository,
    VoteRepository,
)
from qna.domain.service import (
    ContentService,
    NotificationService,
    ReputationService,
    UserService,
    VoteService,
)
from qna.domain.value import NotificationKind, UserId, VotableType, VoteDirection
from qna.persistence.repository.inmemory import (
    InMemoryAnswerRepository,
    InMemoryCommentRepository,
    InMemoryNotificationRepository,
    InMemoryQuestionRepository,
    InMemoryUserRepository,
    InMemoryVoteRepository,
)
from tests.conftest import make_answer, make_question, make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestVoteScenarios:
    """Voting on questions and answers end to end through the service."""

    @pytest.mark.asyncio
    async def test_upvote_notifies_author(self, unit_env):
        """B upvotes A's question: score 1, one upvote notification for A."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        notification_service = await unit_env.get(NotificationService)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)

        alice = await make_user(user_repo, "alice")
        bob = await make_user(user_repo, "bob")
        question = await make_question(question_repo, alice)

        # Act
        outcome = await vote_service.apply_vote(
            VotableType.QUESTION, question.id, bob.id, "up"
        )

        # Assert
        assert outcome.score == 1
        assert outcome.upvotes == 1
        assert outcome.user_vote is VoteDirection.UP

        page = await notification_service.list_for_recipient(alice.id)
        assert len(page.items) == 1
        notification = page.items[0]
        assert notification.sender_id == bob.id
        assert notification.kind is NotificationKind.UPVOTE
        assert notification.refs.question_id == question.id
        assert await notification_service.unread_count(alice.id) == 1

    @pytest.mark.asyncio
    async def test_repeat_upvote_retracts_without_notification(self, unit_env):
        """B upvotes again: score back to 0 and no new notification."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        notification_service = await unit_env.get(NotificationService)
        vote_repo = await unit_env.get(VoteRepository)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)

        alice = await make_user(user_repo)
        bob = await make_user(user_repo)
        question = await make_question(question_repo, alice)
        await vote_service.apply_vote(VotableType.QUESTION, question.id, bob.id, "up")

        # Act
        outcome = await vote_service.apply_vote(
            VotableType.QUESTION, question.id, bob.id, "up"
        )

        # Assert
        assert outcome.score == 0
        assert outcome.user_vote is None
        record = await vote_repo.find_record(VotableType.QUESTION, question.id)
        assert bob.id not in record.upvoters
        page = await notification_service.list_for_recipient(alice.id)
        assert page.total == 1

    @pytest.mark.asyncio
    async def test_self_vote_counts_but_never_notifies(self, unit_env):
        """A upvotes their own answer: score 1, no notification, no reputation."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        notification_service = await unit_env.get(NotificationService)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)

        alice = await make_user(user_repo)
        question = await make_question(question_repo, alice)
        answer = await make_answer(answer_repo, question, alice)

        # Act
        outcome = await vote_service.apply_vote(
            VotableType.ANSWER, answer.id, alice.id, VoteDirection.UP
        )

        # Assert
        assert outcome.score == 1
        page = await notification_service.list_for_recipient(alice.id)
        assert page.total == 0
        assert (await user_repo.find_by_id(alice.id)).reputation == 1

    @pytest.mark.asyncio
    async def test_answer_vote_refs_point_at_answer_and_question(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        notification_service = await unit_env.get(NotificationService)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)

        alice = await make_user(user_repo)
        bob = await make_user(user_repo)
        question = await make_question(question_repo, alice)
        answer = await make_answer(answer_repo, question, bob)

        await vote_service.apply_vote(VotableType.ANSWER, answer.id, alice.id, "down")

        page = await notification_service.list_for_recipient(bob.id)
        assert page.items[0].kind is NotificationKind.DOWNVOTE
        assert page.items[0].refs.answer_id == answer.id
        assert page.items[0].refs.question_id == question.id


class TestReputationEffects:
    """Reputation follows the author's vote balance."""

    @pytest.mark.asyncio
    async def test_upvote_then_retract_restores_reputation(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        settings = await unit_env.get(ReputationSettings)

        alice = await make_user(user_repo)
        bob = await make_user(user_repo)
        question = await make_question(question_repo, alice)

        await vote_service.apply_vote(VotableType.QUESTION, question.id, bob.id, "up")
        after_up = (await user_repo.find_by_id(alice.id)).reputation
        await vote_service.apply_vote(VotableType.QUESTION, question.id, bob.id, "up")
        after_retract = (await user_repo.find_by_id(alice.id)).reputation

        assert after_up == 1 + settings.upvote_delta
        assert after_retract == 1

    @pytest.mark.asyncio
    async def test_switch_moves_score_by_two(self, unit_env):
        """Upvote then downvote: user only in downvoters, score drops by 2."""
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        notification_service = await unit_env.get(NotificationService)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)

        alice = await make_user(user_repo)
        bob = await make_user(user_repo)
        question = await make_question(question_repo, alice)

        up = await vote_service.apply_vote(
            VotableType.QUESTION, question.id, bob.id, "up"
        )
        down = await vote_service.apply_vote(
            VotableType.QUESTION, question.id, bob.id, "down"
        )

        assert up.score - down.score == 2
        record = await vote_repo.find_record(VotableType.QUESTION, question.id)
        assert record.downvoters == {bob.id}
        assert not record.upvoters
        # Both casts were notification-worthy
        page = await notification_service.list_for_recipient(alice.id)
        assert [n.kind for n in page.items] == [
            NotificationKind.DOWNVOTE,
            NotificationKind.UPVOTE,
        ]

    @pytest.mark.asyncio
    async def test_downvotes_never_push_reputation_below_floor(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)

        alice = await make_user(user_repo)
        question = await make_question(question_repo, alice)
        voters = [await make_user(user_repo) for _ in range(5)]

        for voter in voters:
            await vote_service.apply_vote(
                VotableType.QUESTION, question.id, voter.id, "down"
            )

        assert (await user_repo.find_by_id(alice.id)).reputation == 1


class TestVoteErrors:
    """Error conditions of apply_vote."""

    @pytest.mark.asyncio
    async def test_missing_question_raises_not_found(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        user_repo = await unit_env.get(UserRepository)
        bob = await make_user(user_repo)

        with pytest.raises(NotFoundError, match="Question"):
            await vote_service.apply_vote(
                VotableType.QUESTION, uuid4(), bob.id, "up"
            )

    @pytest.mark.asyncio
    async def test_unregistered_voter_leaves_no_vote(self, unit_env):
        """A token for an identity with no user record cannot vote."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)

        alice = await make_user(user_repo)
        question = await make_question(question_repo, alice)

        # Act / Assert
        with pytest.raises(NotFoundError, match="User"):
            await vote_service.apply_vote(
                VotableType.QUESTION, question.id, UserId(uuid4()), "up"
            )

        record = await vote_repo.find_record(VotableType.QUESTION, question.id)
        assert record.score == 0
        assert (await user_repo.find_by_id(alice.id)).reputation == 1

    @pytest.mark.asyncio
    async def test_content_by_unknown_author_leaves_no_vote(self, unit_env):
        """Votes on orphaned content fail before the toggle is stored."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)

        bob = await make_user(user_repo)
        ghost = await make_user(InMemoryUserRepository())
        question = await make_question(question_repo, ghost)

        # Act / Assert
        with pytest.raises(NotFoundError, match="User"):
            await vote_service.apply_vote(
                VotableType.QUESTION, question.id, bob.id, "up"
            )

        record = await vote_repo.find_record(VotableType.QUESTION, question.id)
        assert bob.id not in record.upvoters

    @pytest.mark.asyncio
    async def test_deleted_answer_is_not_votable(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)

        alice = await make_user(user_repo)
        bob = await make_user(user_repo)
        question = await make_question(question_repo, alice)
        answer = await make_answer(answer_repo, question, bob)
        await answer_repo.soft_delete(answer.id, utc_now())

        with pytest.raises(NotFoundError):
            await vote_service.apply_vote(VotableType.ANSWER, answer.id, alice.id, "up")

    @pytest.mark.asyncio
    async def test_malformed_direction_raises_validation_error(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)

        alice = await make_user(user_repo)
        question = await make_question(question_repo, alice)

        with pytest.raises(ValidationError):
            await vote_service.apply_vote(
                VotableType.QUESTION, question.id, alice.id, "sideways"
            )


class TestConcurrentVotes:
    """Concurrent toggles on one entity must all be counted."""

    @pytest.mark.asyncio
    async def test_concurrent_upvotes_are_all_recorded(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        settings = await unit_env.get(ReputationSettings)

        alice = await make_user(user_repo)
        question = await make_question(question_repo, alice)
        voters = [await make_user(user_repo) for _ in range(20)]

        await asyncio.gather(
            *(
                vote_service.apply_vote(
                    VotableType.QUESTION, question.id, voter.id, "up"
                )
                for voter in voters
            )
        )

        record = await vote_repo.find_record(VotableType.QUESTION, question.id)
        assert record.upvoters == {voter.id for voter in voters}
        reputation = (await user_repo.find_by_id(alice.id)).reputation
        assert reputation == 1 + 20 * settings.upvote_delta


class FailingNotificationRepository(InMemoryNotificationRepository):
    """Notification store whose writes always fail."""

    async def save(self, notification: Notification) -> Notification:
        raise InfrastructureError("notification store unavailable")


class TestNotificationFailure:
    """A failed notification write never fails the vote."""

    @pytest.mark.asyncio
    async def test_vote_succeeds_when_notification_write_fails(self):
        # Arrange
        user_repo = InMemoryUserRepository()
        question_repo = InMemoryQuestionRepository()
        vote_repo = InMemoryVoteRepository()
        notification_repo: NotificationRepository = FailingNotificationRepository()
        hub = ConnectionHub(RealtimeSettings())
        notification_service = NotificationService(
            notification_repository=notification_repo,
            push_channel=hub,
            settings=NotificationSettings(),
        )
        content_service = ContentService(
            question_repository=question_repo,
            answer_repository=InMemoryAnswerRepository(),
            comment_repository=InMemoryCommentRepository(),
            notification_service=notification_service,
            user_service=UserService(user_repo),
        )
        vote_service = VoteService(
            vote_repository=vote_repo,
            content_service=content_service,
            reputation_service=ReputationService(user_repo, ReputationSettings()),
            notification_service=notification_service,
            push_channel=hub,
            reputation_settings=ReputationSettings(),
            user_service=UserService(user_repo),
        )

        alice = await make_user(user_repo)
        bob = await make_user(user_repo)
        question = await make_question(question_repo, alice)

        # Act
        outcome = await vote_service.apply_vote(
            VotableType.QUESTION, question.id, bob.id, "up"
        )

        # Assert
        assert outcome.score == 1
        record = await vote_repo.find_record(VotableType.QUESTION, question.id)
        assert bob.id in record.upvoters
        assert await notification_repo.count_by_recipient(alice.id) == 0
