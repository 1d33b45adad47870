"""Test configuration and fixtures."""

from uuid import uuid4

import logfire

from qna.config import AuthSettings
from qna.domain.model import Answer, Question, User
from qna.domain.repository import AnswerRepository, QuestionRepository, UserRepository
from qna.domain.value import AnswerId, QuestionId, UserId, UserRole
from qna.util.jwt import create_token

# Keep test output local; no spans leave the process
logfire.configure(send_to_logfire=False, console=False)


async def make_user(
    user_repo: UserRepository,
    username: str | None = None,
    role: UserRole = UserRole.USER,
) -> User:
    """Persist a user with the starting reputation."""
    user = User(
        id=UserId(uuid4()),
        username=username or f"user-{uuid4().hex[:8]}",
        role=role,
    )
    return await user_repo.save(user)


async def make_question(
    question_repo: QuestionRepository,
    author: User,
    title: str = "How do I fix this?",
) -> Question:
    """Persist a question by `author`."""
    question = Question(
        id=QuestionId(uuid4()),
        author_id=author.id,
        title=title,
        content="Details of the problem",
    )
    return await question_repo.save(question)


async def make_answer(
    answer_repo: AnswerRepository,
    question: Question,
    author: User,
    content: str = "Try turning it off and on again",
) -> Answer:
    """Persist an answer to `question` by `author`."""
    answer = Answer(
        id=AnswerId(uuid4()),
        question_id=question.id,
        author_id=author.id,
        content=content,
    )
    return await answer_repo.save(answer)


def make_token(user_id: UserId | str, role: UserRole = UserRole.USER) -> str:
    """JWT for `user_id` signed with the default test settings."""
    return create_token(str(user_id), AuthSettings(), role=role)




def register_via_api(
    client, username: str, role: UserRole = UserRole.USER
) -> tuple[str, dict[str, str]]:
    """Register a fresh identity over HTTP.

    Returns:
        The new user id and the bearer headers to act as that user
    """
    user_id = str(uuid4())
    headers = {"Authorization": f"Bearer {make_token(user_id, role)}"}
    response = client.post("/users", json={"username": username}, headers=headers)
    assert response.status_code == 201, response.text
    return user_id, headers
