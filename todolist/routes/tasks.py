# todolist/routes/tasks.py
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session

from ..database import get_db
from .. import schemas
from ..services.tasks import TaskService
from .auth import get_current_user_id  # JWT auth dependency

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/tasks", tags=["tasks"])

# Same body for "missing" and "owned by someone else"
TASK_NOT_FOUND = "Tarea no encontrada"


def get_task_service(db: Session = Depends(get_db)) -> TaskService:
    return TaskService(db)


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=TASK_NOT_FOUND)


# 1) List my tasks, optionally filtered by completion
@router.get(
    "",
    response_model=list[schemas.TaskOut],
    summary="List my tasks",
    description=(
        "Return the current user's tasks, newest first. Requires **Bearer** token.\n\n"
        "• **filter**: `completed` or `pending` (case-insensitive); anything else returns all"
    ),
)
def list_tasks(
    status_filter: Optional[str] = Query(default=None, alias="filter"),
    user_id: int = Depends(get_current_user_id),
    service: TaskService = Depends(get_task_service),
):
    return service.list_tasks(user_id, status_filter)


# 2) Statistics (declared before /{task_id} so the path isn't parsed as an id)
@router.get("/statistics", response_model=schemas.TaskStatistics, summary="Task counts")
def get_statistics(
    user_id: int = Depends(get_current_user_id),
    service: TaskService = Depends(get_task_service),
):
    return service.get_statistics(user_id)


# 3) Get a specific task
@router.get("/{task_id}", response_model=schemas.TaskOut, summary="Get a task by ID")
def get_task(
    task_id: int,
    user_id: int = Depends(get_current_user_id),
    service: TaskService = Depends(get_task_service),
):
    task = service.get_task(task_id, user_id)
    if task is None:
        raise _not_found()
    return task


# 4) Create a new task
@router.post(
    "",
    response_model=schemas.TaskOut,
    status_code=status.HTTP_201_CREATED,
    summary="Create a task",
)
def create_task(
    payload: schemas.TaskCreate,
    user_id: int = Depends(get_current_user_id),
    service: TaskService = Depends(get_task_service),
):
    task = service.create_task(payload.title, payload.description, user_id)
    logger.info("Task created: %s by user: %s", task.id, user_id)
    return task


# 5) Replace title/description/completion
@router.put("/{task_id}", response_model=schemas.TaskOut, summary="Update a task")
def update_task(
    task_id: int,
    payload: schemas.TaskUpdate,
    user_id: int = Depends(get_current_user_id),
    service: TaskService = Depends(get_task_service),
):
    task = service.update_task(
        task_id, payload.title, payload.description, payload.is_completed, user_id
    )
    if task is None:
        raise _not_found()
    logger.info("Task updated: %s", task_id)
    return task


# 6) Delete a task permanently
@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a task")
def delete_task(
    task_id: int,
    user_id: int = Depends(get_current_user_id),
    service: TaskService = Depends(get_task_service),
):
    if not service.delete_task(task_id, user_id):
        raise _not_found()
    logger.info("Task deleted: %s", task_id)
    return None


# 7) Flip completion
@router.patch("/{task_id}/toggle", response_model=schemas.TaskOut, summary="Toggle completion")
def toggle_task(
    task_id: int,
    user_id: int = Depends(get_current_user_id),
    service: TaskService = Depends(get_task_service),
):
    task = service.toggle_task(task_id, user_id)
    if task is None:
        raise _not_found()
    logger.info("Task toggled: %s", task_id)
    return task
