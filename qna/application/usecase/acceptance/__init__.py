"""Acceptance use cases."""

from .accept_answer import AcceptAnswerRequest, AcceptAnswerUseCase, AcceptanceResponse
from .unaccept_answer import UnacceptAnswerRequest, UnacceptAnswerUseCase

__all__ = [
    "AcceptAnswerRequest",
    "AcceptAnswerUseCase",
    "AcceptanceResponse",
    "UnacceptAnswerRequest",
    "UnacceptAnswerUseCase",
]
