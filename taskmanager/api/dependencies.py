"""FastAPI dependencies wiring services together for each request."""

from datetime import timedelta
from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from taskmanager.config import Settings, get_settings
from taskmanager.database import get_db
from taskmanager.models.user import User
from taskmanager.repositories.tasks import TaskRepository
from taskmanager.repositories.users import UserRepository
from taskmanager.services.auth import AuthService
from taskmanager.services.authenticator import RequestAuthenticator
from taskmanager.services.passwords import PasswordHasher
from taskmanager.services.task_service import TaskService
from taskmanager.services.tokens import TokenService

# Missing or non-bearer headers reach the authenticator as None
security = HTTPBearer(auto_error=False)


def get_token_service(settings: Annotated[Settings, Depends(get_settings)]) -> TokenService:
    """Get token service configured from settings."""
    return TokenService(
        secret=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        ttl=timedelta(minutes=settings.jwt_expiration_minutes),
    )


def get_password_hasher(settings: Annotated[Settings, Depends(get_settings)]) -> PasswordHasher:
    """Get password hasher configured from settings."""
    return PasswordHasher(rounds=settings.bcrypt_rounds)


def get_user_repository(db: Annotated[Session, Depends(get_db)]) -> UserRepository:
    """Get user repository bound to the request session."""
    return UserRepository(db)


def get_auth_service(
    users: Annotated[UserRepository, Depends(get_user_repository)],
    hasher: Annotated[PasswordHasher, Depends(get_password_hasher)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
) -> AuthService:
    """Get auth service with dependencies."""
    return AuthService(users, hasher, tokens)


def get_authenticator(
    tokens: Annotated[TokenService, Depends(get_token_service)],
    users: Annotated[UserRepository, Depends(get_user_repository)],
) -> RequestAuthenticator:
    """Get request authenticator with dependencies."""
    return RequestAuthenticator(tokens, users)


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    authenticator: Annotated[RequestAuthenticator, Depends(get_authenticator)],
) -> User:
    """Get the current authenticated user from the bearer token."""
    token = credentials.credentials if credentials else None
    return authenticator.authenticate_token(token)


def get_task_service(db: Annotated[Session, Depends(get_db)]) -> TaskService:
    """Get task service with dependencies."""
    return TaskService(TaskRepository(db))
