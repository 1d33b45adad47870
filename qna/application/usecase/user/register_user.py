"""Register user use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from qna.domain.service import UserService
from qna.domain.value import UserId, UserRole


class RegisterUserRequest(BaseModel):
    """Register user request.

    The id and role come from the verified token; only the username is
    chosen by the client.
    """

    user_id: str
    username: str
    role: UserRole = UserRole.USER


class RegisterUserResponse(BaseModel):
    user_id: str
    username: str
    role: UserRole
    reputation: int
    created_at: datetime


class RegisterUserUseCase:
    """Use case for creating the user record of an authenticated identity."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize register user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: RegisterUserRequest) -> RegisterUserResponse:
        """Execute registration.

        Raises:
            ValidationError: If the username is taken or invalid
        """
        user = await self.user_service.register(
            username=request.username,
            role=request.role,
            user_id=UserId(UUID(request.user_id)),
        )
        return RegisterUserResponse(
            user_id=str(user.id),
            username=user.username,
            role=user.role,
            reputation=user.reputation,
            created_at=user.created_at,
        )
