"""In-memory user repository for testing."""

from typing import Optional

from qna.domain.model.user import User
from qna.domain.repository.user import UserRepository
from qna.domain.value import UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        return self._users.get(user_id)

    async def find_by_username(self, username: str) -> Optional[User]:
        for user in self._users.values():
            if user.username == username:
                return user
        return None

    async def save(self, user: User) -> User:
        existing = self._users.get(user.id)
        if existing:
            # Reputation only moves through adjust_reputation
            user = user.model_copy(update={"reputation": existing.reputation})
        self._users[user.id] = user
        return user

    async def adjust_reputation(
        self, user_id: UserId, delta: int, floor: int
    ) -> Optional[int]:
        """Clamped increment; no await between read and write."""
        user = self._users.get(user_id)
        if not user:
            return None
        reputation = max(floor, user.reputation + delta)
        self._users[user_id] = user.model_copy(update={"reputation": reputation})
        return reputation
