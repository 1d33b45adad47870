"""User aggregate root.

Users own a reputation score that moves in response to votes on, and
acceptance of, their content.
"""

from datetime import datetime

from pydantic import Field

from qna.domain.model.common import DomainModel, utc_now
from qna.domain.value import UserId, UserRole

REPUTATION_FLOOR = 1


class User(DomainModel):
    """User aggregate root.

    Credentials live with the identity provider; this model only carries
    what the voting and notification core needs.
    """

    id: UserId
    username: str = Field(min_length=1, max_length=50)
    role: UserRole = UserRole.USER
    reputation: int = Field(default=REPUTATION_FLOOR, ge=REPUTATION_FLOOR)
    created_at: datetime = Field(default_factory=utc_now)
