"""User model."""

from sqlalchemy import Boolean, Column, Integer, String, true
from sqlalchemy.orm import relationship

from taskmanager.database import Base
from taskmanager.models.mixins import TimestampMixin


class User(Base, TimestampMixin):
    """User model for authentication and task ownership."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    name = Column(String(255), nullable=False)
    # Deactivation is an administrative action; not exposed through the API
    is_active = Column(Boolean, nullable=False, default=True, server_default=true())

    # Relationships
    tasks = relationship("Task", back_populates="user", cascade="all, delete-orphan")
