"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from taskmanager.api.dependencies import get_auth_service, get_current_user
from taskmanager.models.user import User
from taskmanager.schemas.auth import (
    AuthResponse,
    MessageResponse,
    UserLogin,
    UserRegister,
    UserResponse,
)
from taskmanager.services.auth import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    user_data: UserRegister,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Register a new user."""
    result = auth_service.register(user_data.email, user_data.password, user_data.name)
    return AuthResponse(token=result.token, user=UserResponse.model_validate(result.user))


@router.post("/login", response_model=AuthResponse)
def login(
    credentials: UserLogin,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Login with email and password."""
    result = auth_service.login(credentials.email, credentials.password)
    return AuthResponse(token=result.token, user=UserResponse.model_validate(result.user))


@router.get("/me", response_model=UserResponse)
def get_me(
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Get current user information."""
    return current_user


@router.post("/logout", response_model=MessageResponse)
def logout(
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Logout (client should discard token)."""
    return MessageResponse(message="Logged out successfully")
