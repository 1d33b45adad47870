"""In-memory vote repository for testing."""

from uuid import UUID

from qna.domain.model.vote import VoteRecord, VoteToggle
from qna.domain.repository.vote import VoteRepository
from qna.domain.value import UserId, VotableType, VoteDirection


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing.

    `toggle` reads and writes the record without yielding to the event
    loop, which makes it atomic with respect to other coroutines.
    """

    def __init__(self) -> None:
        self._records: dict[tuple[VotableType, UUID], VoteRecord] = {}

    async def find_record(
        self, votable_type: VotableType, votable_id: UUID
    ) -> VoteRecord:
        return self._records.get((votable_type, votable_id), VoteRecord())

    async def toggle(
        self,
        votable_type: VotableType,
        votable_id: UUID,
        user_id: UserId,
        direction: VoteDirection,
    ) -> VoteToggle:
        key = (votable_type, votable_id)
        result = self._records.get(key, VoteRecord()).toggle(user_id, direction)
        self._records[key] = result.record
        return result
