"""Task model."""

from sqlalchemy import Column, DateTime, Enum, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import relationship

from taskmanager.database import Base
from taskmanager.models.enums import TaskStatus
from taskmanager.models.mixins import TimestampMixin


class Task(Base, TimestampMixin):
    """Task owned by exactly one user."""

    __tablename__ = "tasks"
    __table_args__ = (UniqueConstraint("user_id", "title", name="uq_tasks_user_id_title"),)

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False, default="")
    status = Column(
        Enum(
            TaskStatus,
            name="taskstatus",
            values_callable=lambda enum_cls: [member.value for member in enum_cls],
        ),
        nullable=False,
        default=TaskStatus.PENDING,
        index=True,
    )
    due_date = Column(DateTime(timezone=True), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    # Relationships
    user = relationship("User", back_populates="tasks")
