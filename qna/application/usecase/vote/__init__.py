"""Vote use cases."""

from .apply_vote import ApplyVoteRequest, ApplyVoteUseCase, VoteResponse
from .get_vote_state import GetVoteStateRequest, GetVoteStateUseCase

__all__ = [
    "ApplyVoteRequest",
    "ApplyVoteUseCase",
    "GetVoteStateRequest",
    "GetVoteStateUseCase",
    "VoteResponse",
]
