"""Apply vote use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from qna.application.usecase.base import BaseUseCase
from qna.domain.service import VoteService
from qna.domain.value import UserId, VotableType, VoteDirection


class ApplyVoteRequest(BaseModel):
    """Apply vote request."""

    votable_type: VotableType
    votable_id: str  # UUID string
    user_id: str  # User ID from authenticated identity
    direction: str  # Validated by the domain: "up" or "down"


class VoteResponse(BaseModel):
    """Vote state of a question or answer."""

    votable_type: VotableType
    votable_id: str
    score: int
    upvotes: int
    downvotes: int
    user_vote: Optional[VoteDirection] = None


class ApplyVoteUseCase(BaseUseCase[ApplyVoteRequest, VoteResponse]):
    """Use case for casting, switching or retracting a vote."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize apply vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: ApplyVoteRequest) -> VoteResponse:
        """Execute the vote toggle.

        Raises:
            ValidationError: If the direction is malformed
            NotFoundError: If the item does not exist or is deleted
        """
        outcome = await self.vote_service.apply_vote(
            votable_type=request.votable_type,
            votable_id=UUID(request.votable_id),
            user_id=UserId(UUID(request.user_id)),
            direction=request.direction,
        )
        return VoteResponse(**outcome.model_dump())
