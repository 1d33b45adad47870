"""User routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, status
from pydantic import BaseModel, Field

from qna.application.usecase.user import (
    GetReputationRequest,
    GetReputationUseCase,
    RegisterUserRequest,
    RegisterUserResponse,
    RegisterUserUseCase,
    ReputationResponse,
)
from qna.domain.service import JWTService
from qna.interface.api.auth import require_identity

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class RegisterUserAPIRequest(BaseModel):
    """API request for registering the authenticated identity."""

    username: str = Field(min_length=1, max_length=50)


@router.post(
    "", response_model=RegisterUserResponse, status_code=status.HTTP_201_CREATED
)
async def register_user(
    request: RegisterUserAPIRequest,
    register_user_use_case: FromDishka[RegisterUserUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> RegisterUserResponse:
    """Create the user record for the identity in the token.

    The id and role come from the token, so a client can only register
    itself.
    """
    identity = require_identity(jwt_service, auth_token, authorization)
    return await register_user_use_case.execute(
        RegisterUserRequest(
            user_id=str(identity.user_id),
            username=request.username,
            role=identity.role,
        )
    )


@router.get("/{user_id}/reputation", response_model=ReputationResponse)
async def get_reputation(
    user_id: UUID,
    get_reputation_use_case: FromDishka[GetReputationUseCase],
) -> ReputationResponse:
    """Public reputation of a user."""
    return await get_reputation_use_case.execute(
        GetReputationRequest(user_id=str(user_id))
    )
