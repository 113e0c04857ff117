"""Task service with ownership enforcement."""

import logging

from taskmanager.errors import ConflictError, ForbiddenError, NotFoundError
from taskmanager.models.enums import TaskStatus
from taskmanager.models.task import Task
from taskmanager.models.user import User
from taskmanager.repositories.tasks import TaskRepository
from taskmanager.schemas.task import TaskCreate, TaskUpdate

logger = logging.getLogger(__name__)


class TaskService:
    """Service for task CRUD scoped to the authenticated user."""

    def __init__(self, tasks: TaskRepository):
        self.tasks = tasks

    def create_task(self, data: TaskCreate, user: User) -> Task:
        """Create a task owned by ``user``. Titles are unique per owner."""
        if self.tasks.title_taken(user.id, data.title):
            raise ConflictError(f'Task with title "{data.title}" already exists')

        task = Task(
            title=data.title,
            description=data.description,
            status=data.status,
            due_date=data.due_date,
            user_id=user.id,
        )
        task = self.tasks.add(task)
        logger.info(f"User {user.id} created task {task.id}")
        return task

    def get_tasks(self, user: User, status: TaskStatus | None = None) -> list[Task]:
        """Get the user's tasks ordered by due date, optionally by status."""
        return self.tasks.list_for_owner(user.id, status)

    def get_task(self, task_id: int, user: User) -> Task:
        """Get a task the user owns.

        Unknown ids raise NotFoundError; tasks owned by someone else raise
        ForbiddenError.
        """
        task = self.tasks.get(task_id)
        if task is None:
            raise NotFoundError(f"Task with ID {task_id} not found")
        if task.user_id != user.id:
            raise ForbiddenError("You can only access your own tasks")
        return task

    def update_task(self, task_id: int, data: TaskUpdate, user: User) -> Task:
        """Apply a partial update to a task the user owns."""
        task = self.get_task(task_id, user)
        changes = data.model_dump(exclude_unset=True, exclude_none=True)

        title = changes.get("title")
        if title is not None and title != task.title:
            if self.tasks.title_taken(user.id, title, exclude_id=task.id):
                raise ConflictError(f'Task with title "{title}" already exists')

        for field, value in changes.items():
            setattr(task, field, value)

        return self.tasks.save(task)

    def delete_task(self, task_id: int, user: User) -> None:
        """Delete a task the user owns."""
        task = self.get_task(task_id, user)
        self.tasks.delete(task)
        logger.info(f"User {user.id} deleted task {task_id}")
