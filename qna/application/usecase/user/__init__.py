"""User use cases."""

from .get_reputation import GetReputationRequest, GetReputationUseCase, ReputationResponse
from .register_user import RegisterUserRequest, RegisterUserResponse, RegisterUserUseCase

__all__ = [
    "GetReputationRequest",
    "GetReputationUseCase",
    "ReputationResponse",
    "RegisterUserRequest",
    "RegisterUserResponse",
    "RegisterUserUseCase",
]
