"""Get reputation use case."""

from uuid import UUID

from pydantic import BaseModel

from qna.domain.service import UserService
from qna.domain.value import UserId


class GetReputationRequest(BaseModel):
    user_id: str


class ReputationResponse(BaseModel):
    user_id: str
    username: str
    reputation: int


class GetReputationUseCase:
    """Use case for reading a user's reputation."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: GetReputationRequest) -> ReputationResponse:
        """Raises NotFoundError if the user does not exist."""
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        return ReputationResponse(
            user_id=str(user.id), username=user.username, reputation=user.reputation
        )
