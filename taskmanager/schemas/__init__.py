"""Pydantic schemas for API requests and responses."""

from taskmanager.schemas.auth import AuthResponse, UserLogin, UserRegister, UserResponse
from taskmanager.schemas.task import TaskCreate, TaskResponse, TaskUpdate

__all__ = [
    "UserRegister",
    "UserLogin",
    "UserResponse",
    "AuthResponse",
    "TaskCreate",
    "TaskUpdate",
    "TaskResponse",
]
