"""User domain service."""

from uuid import uuid4

import logfire

from qna.domain.error import NotFoundError, ValidationError
from qna.domain.model import User
from qna.domain.repository import UserRepository
from qna.domain.value import UserId, UserRole


class UserService:
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def register(
        self,
        username: str,
        role: UserRole = UserRole.USER,
        user_id: UserId | None = None,
    ) -> User:
        """Create a user record for an identity known to the auth provider.

        Raises:
            ValidationError: If the id is already registered or the username taken
        """
        with logfire.span("user_service.register", username=username):
            if user_id and await self.user_repository.find_by_id(user_id):
                raise ValidationError(f"User already registered: {user_id}")
            if await self.user_repository.find_by_username(username):
                logfire.warn("Username already taken", username=username)
                raise ValidationError(f"Username already taken: {username}")

            try:
                user = User(id=user_id or UserId(uuid4()), username=username, role=role)
            except ValueError as e:
                raise ValidationError(str(e)) from e
            saved = await self.user_repository.save(user)
            logfire.info("User registered", user_id=str(saved.id), username=username)
            return saved
