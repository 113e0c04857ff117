"""Request authentication: bearer token to principal."""

import logging

from taskmanager.errors import UnauthorizedError
from taskmanager.models.user import User
from taskmanager.repositories.users import UserRepository
from taskmanager.services.tokens import TokenExpiredError, TokenInvalidError, TokenService

logger = logging.getLogger(__name__)

MISSING_TOKEN = "Missing token"
INVALID_TOKEN = "Invalid token"
EXPIRED_TOKEN = "Token has expired"  # noqa: S105
USER_NOT_FOUND = "User not found"
INACTIVE_USER = "Inactive user"


def extract_bearer_token(authorization: str | None) -> str | None:
    """Return the token from an ``Authorization: Bearer <token>`` header value."""
    if not authorization:
        return None
    scheme, _, credentials = authorization.strip().partition(" ")
    if scheme.lower() != "bearer":
        return None
    return credentials.strip() or None


class RequestAuthenticator:
    """Resolves the principal for a single request, or rejects it.

    Holds no per-request state; every call re-reads the user from the store.
    """

    def __init__(self, tokens: TokenService, users: UserRepository):
        self.tokens = tokens
        self.users = users

    def authenticate(self, authorization: str | None) -> User:
        """Authenticate from a raw Authorization header value."""
        return self.authenticate_token(extract_bearer_token(authorization))

    def authenticate_token(self, token: str | None) -> User:
        """Authenticate from an already extracted bearer token.

        Raises:
            UnauthorizedError: with a reason for each rejection.
        """
        token = token.strip() if token else None
        if not token:
            raise UnauthorizedError(MISSING_TOKEN)

        try:
            claims = self.tokens.verify(token)
        except TokenExpiredError:
            raise UnauthorizedError(EXPIRED_TOKEN) from None
        except TokenInvalidError as e:
            logger.debug(f"Rejected token: {e}")
            raise UnauthorizedError(INVALID_TOKEN) from None

        user = self.users.get_identity(claims.user_id)
        if user is None:
            raise UnauthorizedError(USER_NOT_FOUND)

        if not user.is_active:
            raise UnauthorizedError(INACTIVE_USER)

        return user
