"""Authentication service for registration and login."""

import logging
from dataclasses import dataclass

from taskmanager.errors import ConflictError, ServiceError, UnauthorizedError
from taskmanager.models.user import User
from taskmanager.repositories.users import UserRepository
from taskmanager.services.passwords import PasswordHasher
from taskmanager.services.tokens import TokenService

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"


@dataclass
class AuthResult:
    """Token plus the authenticated user."""

    token: str
    user: User


class AuthService:
    """Service orchestrating registration and login."""

    def __init__(self, users: UserRepository, hasher: PasswordHasher, tokens: TokenService):
        self.users = users
        self.hasher = hasher
        self.tokens = tokens

    def register(self, email: str, password: str, name: str) -> AuthResult:
        """Register a new user and issue a token.

        The existence check and the insert are separate statements; two
        concurrent registrations for one email are settled by the unique
        constraint on the store.
        """
        try:
            if self.users.exists_with_email(email):
                raise ConflictError("User already exists")

            user = self.users.create(email, self.hasher.hash(password), name)
        except ServiceError as e:
            logger.warning(f"Registration error: {e.message}")
            raise

        logger.info(f"Registered user {user.id}")
        return AuthResult(token=self.tokens.issue(user.id, user.email), user=user)

    def login(self, email: str, password: str) -> AuthResult:
        """Authenticate by email and password.

        Unknown email and wrong password fail identically.
        """
        user = self.users.get_by_email(email)
        if user is None or not self.hasher.verify(password, user.password_hash):
            logger.warning(f"Login error: {INVALID_CREDENTIALS}")
            raise UnauthorizedError(INVALID_CREDENTIALS)

        logger.info(f"User {user.id} logged in")
        return AuthResult(token=self.tokens.issue(user.id, user.email), user=user)
