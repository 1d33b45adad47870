"""Vote record for questions and answers.

A vote record is the pair of upvoter/downvoter sets for one entity. The
toggle algorithm lives here and nowhere else; repositories only make it
atomic against their storage.
"""

from typing import Optional

from pydantic import Field, model_validator

from qna.domain.model.common import DomainModel
from qna.domain.value import UserId, VotableType, VoteDirection


class VoteRecord(DomainModel):
    """Upvoters and downvoters of a single question or answer.

    Invariant: a user appears in at most one of the two sets.
    """

    upvoters: frozenset[UserId] = Field(default_factory=frozenset)
    downvoters: frozenset[UserId] = Field(default_factory=frozenset)

    @model_validator(mode="after")
    def validate_exclusive(self) -> "VoteRecord":
        """Reject records where a user both upvoted and downvoted."""
        overlap = self.upvoters & self.downvoters
        if overlap:
            raise ValueError(
                f"Users cannot both upvote and downvote: {sorted(map(str, overlap))}"
            )
        return self

    @property
    def score(self) -> int:
        """Net score: upvotes minus downvotes."""
        return len(self.upvoters) - len(self.downvoters)

    @property
    def upvote_count(self) -> int:
        return len(self.upvoters)

    @property
    def downvote_count(self) -> int:
        return len(self.downvoters)

    def direction_of(self, user_id: UserId) -> Optional[VoteDirection]:
        """Return the user's current vote, or None if they have not voted."""
        if user_id in self.upvoters:
            return VoteDirection.UP
        if user_id in self.downvoters:
            return VoteDirection.DOWN
        return None

    def voters(self, direction: VoteDirection) -> frozenset[UserId]:
        """Return the set of users who voted in `direction`."""
        return self.upvoters if direction is VoteDirection.UP else self.downvoters

    def with_vote(
        self, user_id: UserId, direction: Optional[VoteDirection]
    ) -> "VoteRecord":
        """Return a copy where the user's vote is exactly `direction`.

        `None` removes the user from both sets.
        """
        upvoters = self.upvoters - {user_id}
        downvoters = self.downvoters - {user_id}
        if direction is VoteDirection.UP:
            upvoters = upvoters | {user_id}
        elif direction is VoteDirection.DOWN:
            downvoters = downvoters | {user_id}
        return VoteRecord(upvoters=upvoters, downvoters=downvoters)

    def toggle(self, user_id: UserId, direction: VoteDirection) -> "VoteToggle":
        """Apply one vote action with toggle semantics.

        Casting the direction the user already holds retracts it. Casting
        any other direction records it and clears the opposite vote.
        """
        previous = self.direction_of(user_id)
        current = None if previous is direction else direction
        return VoteToggle(
            record=self.with_vote(user_id, current),
            previous=previous,
            current=current,
        )


class VoteToggle(DomainModel):
    """Result of applying one vote action to a record."""

    record: VoteRecord
    previous: Optional[VoteDirection] = None
    current: Optional[VoteDirection] = None

    @property
    def cast(self) -> bool:
        """True when a vote was added (the notification-worthy branch)."""
        return self.current is not None

    @property
    def retracted(self) -> bool:
        return self.current is None


class VoteOutcome(DomainModel):
    """Observable vote state of an entity from one user's point of view."""

    votable_type: VotableType
    votable_id: str
    score: int
    upvotes: int
    downvotes: int
    user_vote: Optional[VoteDirection] = None

    @classmethod
    def from_record(
        cls,
        votable_type: VotableType,
        votable_id: str,
        record: VoteRecord,
        user_id: UserId,
    ) -> "VoteOutcome":
        return cls(
            votable_type=votable_type,
            votable_id=votable_id,
            score=record.score,
            upvotes=record.upvote_count,
            downvotes=record.downvote_count,
            user_vote=record.direction_of(user_id),
        )
