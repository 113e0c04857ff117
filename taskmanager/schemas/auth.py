"""Authentication schemas."""

from typing import Annotated

from email_validator import validate_email
from pydantic import AfterValidator, BaseModel, ConfigDict, Field


def check_email_format(value: str) -> str:
    """Validate email syntax but keep the address exactly as given.

    Emails are matched case-sensitively, so the normalized form that
    ``EmailStr`` would substitute (lowercased domain) is not used.
    """
    validate_email(value, check_deliverability=False)
    return value


Email = Annotated[str, Field(max_length=255), AfterValidator(check_email_format)]


class UserRegister(BaseModel):
    """User registration request."""

    email: Email
    password: str = Field(..., min_length=8, max_length=128)
    name: str = Field(..., min_length=1, max_length=255)


class UserLogin(BaseModel):
    """User login request."""

    email: Email
    password: str = Field(..., min_length=1, max_length=128)


class UserResponse(BaseModel):
    """User information response. Never carries the password hash."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    name: str


class AuthResponse(BaseModel):
    """Authentication response with token and user info."""

    token: str
    token_type: str = "bearer"  # noqa: S105
    user: UserResponse


class MessageResponse(BaseModel):
    """Plain message response."""

    message: str
