"""Unit tests for UserService."""

from uuid import uuid4

import pytest

from qna.domain.error import NotFoundError, ValidationError
from qna.domain.service import UserService
from qna.domain.value import UserId, UserRole
from qna.persistence.repository.inmemory import InMemoryUserRepository


class TestRegister:
    """Tests for UserService.register()."""

    @pytest.mark.asyncio
    async def test_register_starts_at_reputation_one(self):
        # Arrange
        service = UserService(InMemoryUserRepository())
        user_id = UserId(uuid4())

        # Act
        user = await service.register("ada", role=UserRole.MODERATOR, user_id=user_id)

        # Assert
        assert user.id == user_id
        assert user.reputation == 1
        assert user.role == UserRole.MODERATOR
        assert (await service.get_by_id(user_id)).username == "ada"

    @pytest.mark.asyncio
    async def test_duplicate_username_rejected(self):
        service = UserService(InMemoryUserRepository())
        await service.register("ada")

        with pytest.raises(ValidationError, match="Username already taken"):
            await service.register("ada")

    @pytest.mark.asyncio
    async def test_duplicate_id_rejected(self):
        service = UserService(InMemoryUserRepository())
        user_id = UserId(uuid4())
        await service.register("ada", user_id=user_id)

        with pytest.raises(ValidationError, match="already registered"):
            await service.register("grace", user_id=user_id)

    @pytest.mark.asyncio
    async def test_unknown_user(self):
        service = UserService(InMemoryUserRepository())

        with pytest.raises(NotFoundError):
            await service.get_by_id(UserId(uuid4()))
