"""Unit tests for AcceptanceService."""

from uuid import uuid4

import pytest

from qna.config import ReputationSettings
from qna.domain.error import ForbiddenError, InvalidReferenceError, NotFoundError
from qna.domain.repository import AnswerRepository, QuestionRepository, UserRepository
from qna.domain.service import (
    AcceptanceService,
    ContentService,
    NotificationService,
)
from qna.domain.value import AnswerId, Identity, NotificationKind
from tests.conftest import make_answer, make_question, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _reputation(user_repo, user_id) -> int:
    return (await user_repo.find_by_id(user_id)).reputation


class TestAccept:
    """Tests for AcceptanceService.accept()."""

    @pytest.mark.asyncio
    async def test_accept_marks_answer_grants_bonus_and_notifies(self, unit_env):
        """A accepts B's answer: pointer set, flag set, +15 for B, B notified."""
        # Arrange
        acceptance_service = await unit_env.get(AcceptanceService)
        notification_service = await unit_env.get(NotificationService)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        settings = await unit_env.get(ReputationSettings)

        alice = await make_user(user_repo)
        bob = await make_user(user_repo)
        question = await make_question(question_repo, alice)
        answer = await make_answer(answer_repo, question, bob)

        # Act
        outcome = await acceptance_service.accept(question.id, answer.id, alice.id)

        # Assert
        assert outcome.changed
        assert outcome.accepted_answer_id == answer.id
        assert (await question_repo.find_by_id(question.id)).accepted_answer_id == answer.id

        accepted = await answer_repo.find_by_id(answer.id)
        assert accepted.is_accepted
        assert accepted.accepted_by == alice.id
        assert accepted.accepted_at is not None

        assert await _reputation(user_repo, bob.id) == 1 + settings.accept_bonus

        page = await notification_service.list_for_recipient(bob.id)
        assert len(page.items) == 1
        assert page.items[0].kind is NotificationKind.ACCEPTED
        assert page.items[0].sender_id == alice.id
        assert page.items[0].refs.answer_id == answer.id

    @pytest.mark.asyncio
    async def test_reaccepting_same_answer_is_noop(self, unit_env):
        acceptance_service = await unit_env.get(AcceptanceService)
        notification_service = await unit_env.get(NotificationService)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        settings = await unit_env.get(ReputationSettings)

        alice = await make_user(user_repo)
        bob = await make_user(user_repo)
        question = await make_question(question_repo, alice)
        answer = await make_answer(answer_repo, question, bob)
        await acceptance_service.accept(question.id, answer.id, alice.id)

        outcome = await acceptance_service.accept(question.id, answer.id, alice.id)

        assert not outcome.changed
        assert await _reputation(user_repo, bob.id) == 1 + settings.accept_bonus
        assert (await notification_service.list_for_recipient(bob.id)).total == 1

    @pytest.mark.asyncio
    async def test_accepting_another_answer_moves_acceptance(self, unit_env):
        """Only one accepted answer: the previous one is unmarked and its bonus revoked."""
        acceptance_service = await unit_env.get(AcceptanceService)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        settings = await unit_env.get(ReputationSettings)

        alice = await make_user(user_repo)
        bob = await make_user(user_repo)
        carol = await make_user(user_repo)
        question = await make_question(question_repo, alice)
        first = await make_answer(answer_repo, question, bob)
        second = await make_answer(answer_repo, question, carol)
        await acceptance_service.accept(question.id, first.id, alice.id)

        outcome = await acceptance_service.accept(question.id, second.id, alice.id)

        assert outcome.previous_answer_id == first.id
        assert (await question_repo.find_by_id(question.id)).accepted_answer_id == second.id
        assert not (await answer_repo.find_by_id(first.id)).is_accepted
        assert (await answer_repo.find_by_id(second.id)).is_accepted
        assert await _reputation(user_repo, bob.id) == 1
        assert await _reputation(user_repo, carol.id) == 1 + settings.accept_bonus

    @pytest.mark.asyncio
    async def test_accepting_own_answer_grants_nothing(self, unit_env):
        acceptance_service = await unit_env.get(AcceptanceService)
        notification_service = await unit_env.get(NotificationService)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)

        alice = await make_user(user_repo)
        question = await make_question(question_repo, alice)
        answer = await make_answer(answer_repo, question, alice)

        outcome = await acceptance_service.accept(question.id, answer.id, alice.id)

        assert outcome.changed
        assert await _reputation(user_repo, alice.id) == 1
        assert (await notification_service.list_for_recipient(alice.id)).total == 0


class TestAcceptErrors:
    """Error conditions of accept()."""

    @pytest.mark.asyncio
    async def test_non_author_is_forbidden(self, unit_env):
        acceptance_service = await unit_env.get(AcceptanceService)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)

        alice = await make_user(user_repo)
        bob = await make_user(user_repo)
        question = await make_question(question_repo, alice)
        answer = await make_answer(answer_repo, question, bob)

        with pytest.raises(ForbiddenError):
            await acceptance_service.accept(question.id, answer.id, bob.id)

        assert (await question_repo.find_by_id(question.id)).accepted_answer_id is None

    @pytest.mark.asyncio
    async def test_answer_from_other_question_is_invalid_reference(self, unit_env):
        acceptance_service = await unit_env.get(AcceptanceService)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)

        alice = await make_user(user_repo)
        bob = await make_user(user_repo)
        question = await make_question(question_repo, alice)
        other_question = await make_question(question_repo, alice, title="Another")
        foreign_answer = await make_answer(answer_repo, other_question, bob)

        with pytest.raises(InvalidReferenceError):
            await acceptance_service.accept(question.id, foreign_answer.id, alice.id)

    @pytest.mark.asyncio
    async def test_unknown_answer_is_not_found(self, unit_env):
        acceptance_service = await unit_env.get(AcceptanceService)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)

        alice = await make_user(user_repo)
        question = await make_question(question_repo, alice)

        with pytest.raises(NotFoundError):
            await acceptance_service.accept(question.id, AnswerId(uuid4()), alice.id)


class TestUnaccept:
    """Tests for unaccept() and clearing on answer deletion."""

    @pytest.mark.asyncio
    async def test_unaccept_clears_and_revokes(self, unit_env):
        acceptance_service = await unit_env.get(AcceptanceService)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)

        alice = await make_user(user_repo)
        bob = await make_user(user_repo)
        question = await make_question(question_repo, alice)
        answer = await make_answer(answer_repo, question, bob)
        await acceptance_service.accept(question.id, answer.id, alice.id)

        outcome = await acceptance_service.unaccept(question.id, alice.id)

        assert outcome.changed
        assert outcome.previous_answer_id == answer.id
        assert (await question_repo.find_by_id(question.id)).accepted_answer_id is None
        assert not (await answer_repo.find_by_id(answer.id)).is_accepted
        assert await _reputation(user_repo, bob.id) == 1

    @pytest.mark.asyncio
    async def test_unaccept_without_acceptance_is_noop(self, unit_env):
        acceptance_service = await unit_env.get(AcceptanceService)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)

        alice = await make_user(user_repo)
        question = await make_question(question_repo, alice)

        outcome = await acceptance_service.unaccept(question.id, alice.id)

        assert not outcome.changed

    @pytest.mark.asyncio
    async def test_deleting_accepted_answer_clears_acceptance(self, unit_env):
        acceptance_service = await unit_env.get(AcceptanceService)
        content_service = await unit_env.get(ContentService)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)

        alice = await make_user(user_repo)
        bob = await make_user(user_repo)
        question = await make_question(question_repo, alice)
        answer = await make_answer(answer_repo, question, bob)
        await acceptance_service.accept(question.id, answer.id, alice.id)

        deleted = await content_service.delete_answer(
            answer.id, Identity(user_id=bob.id)
        )
        cleared = await acceptance_service.clear_acceptance(deleted)

        assert cleared
        assert (await question_repo.find_by_id(question.id)).accepted_answer_id is None
        assert await _reputation(user_repo, bob.id) == 1
