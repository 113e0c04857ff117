"""Task schemas."""

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from taskmanager.models.enums import TaskStatus


def to_utc(value: datetime | None) -> datetime | None:
    """Normalize a datetime to UTC. Naive values are taken to be UTC already."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


class TaskCreate(BaseModel):
    """Create a new task."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., max_length=5000)
    status: TaskStatus
    due_date: datetime

    @field_validator("due_date")
    @classmethod
    def normalize_due_date(cls, value: datetime) -> datetime:
        return to_utc(value)


class TaskUpdate(BaseModel):
    """Partially update a task. Omitted fields are left unchanged."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = Field(None, max_length=5000)
    status: TaskStatus | None = None
    due_date: datetime | None = None

    @field_validator("due_date")
    @classmethod
    def normalize_due_date(cls, value: datetime | None) -> datetime | None:
        return to_utc(value)


class TaskResponse(BaseModel):
    """Task response."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: int
    title: str
    description: str
    status: TaskStatus
    due_date: datetime
    user_id: int

    # SQLite hands back naive values; they were stored as UTC
    @field_validator("due_date")
    @classmethod
    def normalize_due_date(cls, value: datetime) -> datetime:
        return to_utc(value)
