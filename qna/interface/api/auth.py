"""Request authentication helpers.

The acting identity comes from the `auth_token` cookie or, for API clients,
an `Authorization: Bearer` header. Routes resolve it once and pass it into
use cases explicitly.
"""

from qna.domain.service import JWTService
from qna.domain.value import Identity
from qna.interface.error import AuthenticationError

BEARER_PREFIX = "bearer "


def extract_token(auth_token: str | None, authorization: str | None) -> str | None:
    """Pick the JWT from the cookie, falling back to the bearer header."""
    if auth_token:
        return auth_token
    if authorization and authorization.lower().startswith(BEARER_PREFIX):
        return authorization[len(BEARER_PREFIX) :].strip() or None
    return None


def require_identity(
    jwt_service: JWTService,
    auth_token: str | None,
    authorization: str | None = None,
    detail: str = "Authentication required",
) -> Identity:
    """Resolve the acting identity.

    Raises:
        AuthenticationError: If no valid token was presented (mapped to 401)
    """
    identity = jwt_service.get_identity_from_token(
        extract_token(auth_token, authorization)
    )
    if not identity:
        raise AuthenticationError(detail)
    return identity
