"""Get vote state use case."""

from uuid import UUID

from pydantic import BaseModel

from qna.application.usecase.vote.apply_vote import VoteResponse
from qna.domain.service import VoteService
from qna.domain.value import UserId, VotableType


class GetVoteStateRequest(BaseModel):
    """Get vote state request."""

    votable_type: VotableType
    votable_id: str
    user_id: str


class GetVoteStateUseCase:
    """Use case for reading an item's score and the caller's vote."""

    def __init__(self, vote_service: VoteService) -> None:
        self.vote_service = vote_service

    async def execute(self, request: GetVoteStateRequest) -> VoteResponse:
        outcome = await self.vote_service.get_vote_state(
            votable_type=request.votable_type,
            votable_id=UUID(request.votable_id),
            user_id=UserId(UUID(request.user_id)),
        )
        return VoteResponse(**outcome.model_dump())
