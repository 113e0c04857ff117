"""Task API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from taskmanager.api.dependencies import get_current_user, get_task_service
from taskmanager.models.enums import TaskStatus
from taskmanager.models.user import User
from taskmanager.schemas.task import TaskCreate, TaskResponse, TaskUpdate
from taskmanager.services.task_service import TaskService

router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
def create_task(
    task_data: TaskCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    task_service: Annotated[TaskService, Depends(get_task_service)],
):
    """Create a new task."""
    return task_service.create_task(task_data, current_user)


@router.get("", response_model=list[TaskResponse])
def get_tasks(
    current_user: Annotated[User, Depends(get_current_user)],
    task_service: Annotated[TaskService, Depends(get_task_service)],
    status: TaskStatus | None = Query(default=None, description="Only tasks with this status"),
):
    """Get the current user's tasks ordered by due date."""
    return task_service.get_tasks(current_user, status)


@router.get("/{task_id}", response_model=TaskResponse)
def get_task(
    task_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    task_service: Annotated[TaskService, Depends(get_task_service)],
):
    """Get a specific task."""
    return task_service.get_task(task_id, current_user)


@router.put("/{task_id}", response_model=TaskResponse)
def update_task(
    task_id: int,
    task_data: TaskUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    task_service: Annotated[TaskService, Depends(get_task_service)],
):
    """Update a task."""
    return task_service.update_task(task_id, task_data, current_user)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(
    task_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    task_service: Annotated[TaskService, Depends(get_task_service)],
):
    """Delete a task."""
    task_service.delete_task(task_id, current_user)
