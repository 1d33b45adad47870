"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM.
"""

from typing import Any, Dict, Optional
from uuid import UUID

from qna.domain.model import Answer, Comment, Notification, Question, User
from qna.domain.value import (
    AnswerId,
    CommentableType,
    CommentId,
    NotificationId,
    NotificationKind,
    NotificationRefs,
    QuestionId,
    UserId,
    UserRole,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _optional_uuid(value: Any) -> Optional[UUID]:
    return _uuid(value) if value is not None else None


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        username=row["username"],
        role=UserRole(row["role"]),
        reputation=row["reputation"],
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return user.model_dump(mode="python") | {"role": user.role.value}


def row_to_question(row: Dict[str, Any]) -> Question:
    """Convert database row to Question domain model."""
    return Question(
        id=QuestionId(_uuid(row["id"])),
        author_id=UserId(_uuid(row["author_id"])),
        title=row["title"],
        content=row["content"],
        answer_count=row["answer_count"],
        accepted_answer_id=(
            AnswerId(_uuid(row["accepted_answer_id"]))
            if row.get("accepted_answer_id")
            else None
        ),
        created_at=row["created_at"],
        deleted_at=row.get("deleted_at"),
    )


def question_to_dict(question: Question) -> Dict[str, Any]:
    return question.model_dump()


def row_to_answer(row: Dict[str, Any]) -> Answer:
    """Convert database row to Answer domain model."""
    accepted_by = _optional_uuid(row.get("accepted_by"))
    return Answer(
        id=AnswerId(_uuid(row["id"])),
        question_id=QuestionId(_uuid(row["question_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        content=row["content"],
        is_accepted=row["is_accepted"],
        accepted_at=row.get("accepted_at"),
        accepted_by=UserId(accepted_by) if accepted_by else None,
        created_at=row["created_at"],
        deleted_at=row.get("deleted_at"),
    )


def answer_to_dict(answer: Answer) -> Dict[str, Any]:
    return answer.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    return Comment(
        id=CommentId(_uuid(row["id"])),
        content_type=CommentableType(row["content_type"]),
        content_id=_uuid(row["content_id"]),
        question_id=QuestionId(_uuid(row["question_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        text=row["text"],
        created_at=row["created_at"],
        deleted_at=row.get("deleted_at"),
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    return comment.model_dump() | {"content_type": comment.content_type.value}


def row_to_notification(row: Dict[str, Any]) -> Notification:
    """Convert database row to Notification domain model.

    The flat `question_id`/`answer_id`/`comment_id` columns become the
    nested `refs` value object.
    """
    question_id = _optional_uuid(row.get("question_id"))
    answer_id = _optional_uuid(row.get("answer_id"))
    comment_id = _optional_uuid(row.get("comment_id"))
    return Notification(
        id=NotificationId(_uuid(row["id"])),
        recipient_id=UserId(_uuid(row["recipient_id"])),
        sender_id=UserId(_uuid(row["sender_id"])),
        kind=NotificationKind(row["kind"]),
        refs=NotificationRefs(
            question_id=QuestionId(question_id) if question_id else None,
            answer_id=AnswerId(answer_id) if answer_id else None,
            comment_id=CommentId(comment_id) if comment_id else None,
        ),
        read=row["read"],
        read_at=row.get("read_at"),
        created_at=row["created_at"],
    )


def notification_to_dict(notification: Notification) -> Dict[str, Any]:
    """Convert Notification domain model to database dict (flattening refs)."""
    return {
        "id": notification.id,
        "recipient_id": notification.recipient_id,
        "sender_id": notification.sender_id,
        "kind": notification.kind.value,
        "question_id": notification.refs.question_id,
        "answer_id": notification.refs.answer_id,
        "comment_id": notification.refs.comment_id,
        "read": notification.read,
        "read_at": notification.read_at,
        "created_at": notification.created_at,
    }
