"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from qna.domain.model.user import User
from qna.domain.value import UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_username(self, username: str) -> Optional[User]:
        """Find a user by username."""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass

    @abstractmethod
    async def adjust_reputation(
        self, user_id: UserId, delta: int, floor: int
    ) -> Optional[int]:
        """Atomically add `delta` to a user's reputation, clamped at `floor`.

        Must be an increment-style update so concurrent adjustments for the
        same user are all applied.

        Args:
            user_id: The user's unique identifier
            delta: Points to add (may be negative)
            floor: Lowest reputation allowed after the update

        Returns:
            The new reputation, or None if the user does not exist
        """
        pass
