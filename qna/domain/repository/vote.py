"""Vote repository interface."""

from abc import ABC, abstractmethod
from uuid import UUID

from qna.domain.model.vote import VoteRecord, VoteToggle
from qna.domain.value import UserId, VotableType, VoteDirection


class VoteRepository(ABC):
    """Repository for the per-entity vote records.

    Defines the contract for vote persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_record(
        self, votable_type: VotableType, votable_id: UUID
    ) -> VoteRecord:
        """Load the vote record of a question or answer.

        Args:
            votable_type: Type of item (question or answer)
            votable_id: ID of the item

        Returns:
            The vote record (empty if nobody has voted)
        """
        pass

    @abstractmethod
    async def toggle(
        self,
        votable_type: VotableType,
        votable_id: UUID,
        user_id: UserId,
        direction: VoteDirection,
    ) -> VoteToggle:
        """Apply one vote action with toggle semantics, atomically.

        Implementations read the current record, apply
        `VoteRecord.toggle` and persist the user's new vote as one unit so
        concurrent votes on the same entity are never lost.

        Args:
            votable_type: Type of item (question or answer)
            votable_id: ID of the item
            user_id: The voting user's ID
            direction: Direction of the vote action

        Returns:
            The toggle result including the new record
        """
        pass
