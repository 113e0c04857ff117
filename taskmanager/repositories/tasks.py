"""Task store."""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from taskmanager.errors import ConflictError
from taskmanager.models.enums import TaskStatus
from taskmanager.models.task import Task


class TaskRepository:
    """Repository for task records."""

    def __init__(self, db: Session):
        self.db = db

    def get(self, task_id: int) -> Task | None:
        """Get a task by id regardless of owner."""
        return self.db.query(Task).filter(Task.id == task_id).first()

    def list_for_owner(self, user_id: int, status: TaskStatus | None = None) -> list[Task]:
        """List an owner's tasks, optionally by status, ordered by due date ascending."""
        query = self.db.query(Task).filter(Task.user_id == user_id)
        if status is not None:
            query = query.filter(Task.status == status)
        return query.order_by(Task.due_date.asc(), Task.id.asc()).all()

    def title_taken(self, user_id: int, title: str, exclude_id: int | None = None) -> bool:
        """Check whether the owner already has a task with this title."""
        query = self.db.query(Task.id).filter(Task.user_id == user_id, Task.title == title)
        if exclude_id is not None:
            query = query.filter(Task.id != exclude_id)
        return query.first() is not None

    def add(self, task: Task) -> Task:
        """Insert a new task."""
        self.db.add(task)
        self._commit(task.title)
        self.db.refresh(task)
        return task

    def save(self, task: Task) -> Task:
        """Persist changes to an existing task."""
        self._commit(task.title)
        self.db.refresh(task)
        return task

    def delete(self, task: Task) -> None:
        """Remove a task."""
        self.db.delete(task)
        self.db.commit()

    def _commit(self, title: str) -> None:
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise ConflictError(f'Task with title "{title}" already exists') from None
