"""Reputation domain service."""

import logfire

from qna.config import ReputationSettings
from qna.domain.error import NotFoundError
from qna.domain.repository import UserRepository
from qna.domain.value import UserId

from .base import Service


class ReputationService(Service):
    """Clamped accumulator over a user's reputation score."""

    def __init__(
        self, user_repository: UserRepository, settings: ReputationSettings
    ) -> None:
        """Initialize reputation service.

        Args:
            user_repository: User repository
            settings: Reputation rules (floor, bonuses)
        """
        self.user_repository = user_repository
        self.settings = settings

    async def adjust(self, user_id: UserId, delta: int) -> int:
        """Apply `delta` to a user's reputation, never dropping below the floor.

        Each call is an independent, immediately persisted increment; the
        repository applies it atomically so concurrent adjustments for the
        same user are all counted.

        Args:
            user_id: Beneficiary (or loser) of the adjustment
            delta: Points to add, may be negative

        Returns:
            The user's new reputation

        Raises:
            NotFoundError: If the user does not exist
        """
        with logfire.span(
            "reputation_service.adjust", user_id=str(user_id), delta=delta
        ):
            if delta == 0:
                user = await self.user_repository.find_by_id(user_id)
                if not user:
                    raise NotFoundError("User", str(user_id))
                return user.reputation

            reputation = await self.user_repository.adjust_reputation(
                user_id, delta, self.settings.floor
            )
            if reputation is None:
                logfire.warn("Reputation change for unknown user", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))

            logfire.info(
                "Reputation adjusted",
                user_id=str(user_id),
                delta=delta,
                reputation=reputation,
            )
            return reputation
