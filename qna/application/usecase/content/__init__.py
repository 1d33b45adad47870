"""Content use cases (questions, answers, comments)."""

from .add_comment import AddCommentRequest, AddCommentResponse, AddCommentUseCase
from .create_question import (
    CreateQuestionRequest,
    CreateQuestionResponse,
    CreateQuestionUseCase,
)
from .delete_content import (
    DeleteAnswerUseCase,
    DeleteContentRequest,
    DeleteContentResponse,
    DeleteQuestionUseCase,
)
from .post_answer import PostAnswerRequest, PostAnswerResponse, PostAnswerUseCase

__all__ = [
    "AddCommentRequest",
    "AddCommentResponse",
    "AddCommentUseCase",
    "CreateQuestionRequest",
    "CreateQuestionResponse",
    "CreateQuestionUseCase",
    "DeleteAnswerUseCase",
    "DeleteContentRequest",
    "DeleteContentResponse",
    "DeleteQuestionUseCase",
    "PostAnswerRequest",
    "PostAnswerResponse",
    "PostAnswerUseCase",
]
