"""Data access for users and tasks."""

from taskmanager.repositories.tasks import TaskRepository
from taskmanager.repositories.users import UserRepository

__all__ = ["UserRepository", "TaskRepository"]
