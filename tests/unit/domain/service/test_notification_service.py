"""Unit tests for NotificationService."""

from uuid import uuid4

import pytest

from qna.adapter.realtime.hub import ConnectionHub
from qna.config import NotificationSettings, RealtimeSettings
from qna.domain.error import ForbiddenError, NotFoundError
from qna.domain.repository import NotificationRepository
from qna.domain.service import NotificationService
from qna.domain.value import (
    NotificationId,
    NotificationKind,
    NotificationRefs,
    QuestionId,
    UserId,
)
from qna.persistence.repository.inmemory import InMemoryNotificationRepository
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


def _user() -> UserId:
    return UserId(uuid4())


class TestNotify:
    """Tests for NotificationService.notify()."""

    @pytest.mark.asyncio
    async def test_creates_unread_notification(self, unit_env):
        service = await unit_env.get(NotificationService)
        recipient, sender = _user(), _user()
        refs = NotificationRefs(question_id=QuestionId(uuid4()))

        notification = await service.notify(
            recipient, sender, NotificationKind.COMMENT, refs
        )

        assert notification is not None
        assert notification.read is False
        assert notification.read_at is None
        assert notification.refs == refs
        assert await service.unread_count(recipient) == 1

    @pytest.mark.asyncio
    async def test_self_action_is_suppressed(self, unit_env):
        service = await unit_env.get(NotificationService)
        repo = await unit_env.get(NotificationRepository)
        user = _user()

        result = await service.notify(user, user, NotificationKind.UPVOTE)

        assert result is None
        assert await repo.count_by_recipient(user) == 0

    @pytest.mark.asyncio
    async def test_retention_keeps_most_recent_hundred(self, unit_env):
        """105 events from 105 senders leave exactly the newest 100."""
        service = await unit_env.get(NotificationService)
        repo = await unit_env.get(NotificationRepository)
        recipient = _user()
        senders = [_user() for _ in range(105)]

        for sender in senders:
            await service.notify(recipient, sender, NotificationKind.UPVOTE)

        assert await repo.count_by_recipient(recipient) == 100
        kept = await repo.find_by_recipient(recipient, limit=200, offset=0)
        assert [n.sender_id for n in kept] == list(reversed(senders[5:]))

    @pytest.mark.asyncio
    async def test_retention_is_per_recipient(self):
        service = NotificationService(
            InMemoryNotificationRepository(),
            ConnectionHub(RealtimeSettings()),
            NotificationSettings(retention_cap=3),
        )
        busy, quiet = _user(), _user()

        await service.notify(quiet, _user(), NotificationKind.COMMENT)
        for _ in range(5):
            await service.notify(busy, _user(), NotificationKind.UPVOTE)

        assert (await service.list_for_recipient(busy)).total == 3
        assert (await service.list_for_recipient(quiet)).total == 1


class TestReadState:
    """Tests for read/unread transitions."""

    @pytest.mark.asyncio
    async def test_mark_read_sets_timestamp(self, unit_env):
        service = await unit_env.get(NotificationService)
        recipient = _user()
        created = await service.notify(recipient, _user(), NotificationKind.ACCEPTED)

        updated = await service.mark_read(created.id, recipient)

        assert updated.read is True
        assert updated.read_at is not None
        assert await service.unread_count(recipient) == 0

    @pytest.mark.asyncio
    async def test_mark_unread_clears_timestamp(self, unit_env):
        service = await unit_env.get(NotificationService)
        recipient = _user()
        created = await service.notify(recipient, _user(), NotificationKind.ACCEPTED)
        await service.mark_read(created.id, recipient)

        updated = await service.mark_unread(created.id, recipient)

        assert updated.read is False
        assert updated.read_at is None
        assert await service.unread_count(recipient) == 1

    @pytest.mark.asyncio
    async def test_mark_all_read_uses_one_timestamp(self, unit_env):
        service = await unit_env.get(NotificationService)
        recipient, other = _user(), _user()
        for _ in range(3):
            await service.notify(recipient, _user(), NotificationKind.COMMENT)
        await service.notify(other, _user(), NotificationKind.COMMENT)

        updated = await service.mark_all_read(recipient)

        assert updated == 3
        page = await service.list_for_recipient(recipient)
        assert {n.read_at for n in page.items} == {page.items[0].read_at}
        assert await service.unread_count(recipient) == 0
        assert await service.unread_count(other) == 1

    @pytest.mark.asyncio
    async def test_other_user_cannot_mark_read(self, unit_env):
        service = await unit_env.get(NotificationService)
        recipient, stranger = _user(), _user()
        created = await service.notify(recipient, _user(), NotificationKind.COMMENT)

        with pytest.raises(ForbiddenError):
            await service.mark_read(created.id, stranger)

    @pytest.mark.asyncio
    async def test_unknown_notification_is_not_found(self, unit_env):
        service = await unit_env.get(NotificationService)

        with pytest.raises(NotFoundError):
            await service.mark_read(NotificationId(uuid4()), _user())


class TestDelete:
    """Tests for NotificationService.delete()."""

    @pytest.mark.asyncio
    async def test_recipient_deletes_permanently(self, unit_env):
        service = await unit_env.get(NotificationService)
        repo = await unit_env.get(NotificationRepository)
        recipient = _user()
        created = await service.notify(recipient, _user(), NotificationKind.COMMENT)

        await service.delete(created.id, recipient)

        assert await repo.find_by_id(created.id) is None

    @pytest.mark.asyncio
    async def test_other_user_cannot_delete(self, unit_env):
        service = await unit_env.get(NotificationService)
        repo = await unit_env.get(NotificationRepository)
        recipient, stranger = _user(), _user()
        created = await service.notify(recipient, _user(), NotificationKind.COMMENT)

        with pytest.raises(ForbiddenError):
            await service.delete(created.id, stranger)

        assert await repo.find_by_id(created.id) is not None


class TestListing:
    """Tests for list_for_recipient paging."""

    @pytest.mark.asyncio
    async def test_pages_newest_first_with_counts(self, unit_env):
        service = await unit_env.get(NotificationService)
        recipient = _user()
        senders = [_user() for _ in range(5)]
        for sender in senders:
            await service.notify(recipient, sender, NotificationKind.UPVOTE)

        page = await service.list_for_recipient(recipient, limit=2, offset=1)

        assert [n.sender_id for n in page.items] == [senders[3], senders[2]]
        assert page.total == 5
        assert page.unread_count == 5
        assert page.limit == 2
        assert page.offset == 1

    @pytest.mark.asyncio
    async def test_limit_is_capped(self, unit_env):
        service = await unit_env.get(NotificationService)
        settings = await unit_env.get(NotificationSettings)

        page = await service.list_for_recipient(_user(), limit=10_000)

        assert page.limit == settings.max_page_size
