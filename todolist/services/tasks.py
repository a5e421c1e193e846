# todolist/services/tasks.py
from typing import Optional

from sqlalchemy import select, func
from sqlalchemy.orm import Session

from .. import models, schemas
from ..exceptions import TaskValidationError
from ..models import utcnow
from ..schemas import TITLE_MAX_LENGTH, DESCRIPTION_MAX_LENGTH


def _validate(title: Optional[str], description: Optional[str]) -> None:
    # Schemas check this at the HTTP edge; direct callers must not persist bad rows either
    if title is None or not title.strip():
        raise TaskValidationError("title", "Title is required")
    if len(title) > TITLE_MAX_LENGTH:
        raise TaskValidationError(
            "title", f"Title cannot exceed {TITLE_MAX_LENGTH} characters"
        )
    if description is not None and len(description) > DESCRIPTION_MAX_LENGTH:
        raise TaskValidationError(
            "description", f"Description cannot exceed {DESCRIPTION_MAX_LENGTH} characters"
        )


class TaskService:
    # Lookups filter on id AND user_id: a foreign task reads as missing

    def __init__(self, db: Session):
        self.db = db

    def _owned(self, task_id: int, user_id: int) -> Optional[models.Task]:
        return self.db.execute(
            select(models.Task).where(
                models.Task.id == task_id,
                models.Task.user_id == user_id,
            )
        ).scalar_one_or_none()

    def list_tasks(self, user_id: int, status_filter: Optional[str] = None) -> list[models.Task]:
        stmt = select(models.Task).where(models.Task.user_id == user_id)

        # "completed" / "pending" (any case); everything else means no filter
        wanted = (status_filter or "").lower()
        if wanted == "completed":
            stmt = stmt.where(models.Task.is_completed.is_(True))
        elif wanted == "pending":
            stmt = stmt.where(models.Task.is_completed.is_(False))

        # Newest first, id as stable tie-break
        stmt = stmt.order_by(models.Task.created_at.desc(), models.Task.id.desc())
        return list(self.db.execute(stmt).scalars().all())

    def get_task(self, task_id: int, user_id: int) -> Optional[models.Task]:
        return self._owned(task_id, user_id)

    def create_task(self, title: str, description: Optional[str], user_id: int) -> models.Task:
        _validate(title, description)
        task = models.Task(
            title=title,
            description=description,
            is_completed=False,
            completed_at=None,
            created_at=utcnow(),
            user_id=user_id,
        )
        self.db.add(task)
        self.db.commit()
        self.db.refresh(task)
        return task

    def update_task(
        self,
        task_id: int,
        title: str,
        description: Optional[str],
        is_completed: bool,
        user_id: int,
    ) -> Optional[models.Task]:
        _validate(title, description)
        task = self._owned(task_id, user_id)
        if task is None:
            return None

        task.title = title
        task.description = description

        if is_completed and not task.is_completed:
            task.completed_at = utcnow()
        elif not is_completed and task.is_completed:
            task.completed_at = None
        task.is_completed = is_completed

        self.db.commit()
        self.db.refresh(task)
        return task

    def delete_task(self, task_id: int, user_id: int) -> bool:
        task = self._owned(task_id, user_id)
        if task is None:
            return False
        self.db.delete(task)
        self.db.commit()
        return True

    def toggle_task(self, task_id: int, user_id: int) -> Optional[models.Task]:
        task = self._owned(task_id, user_id)
        if task is None:
            return None

        task.is_completed = not task.is_completed
        task.completed_at = utcnow() if task.is_completed else None

        self.db.commit()
        self.db.refresh(task)
        return task

    def get_statistics(self, user_id: int) -> schemas.TaskStatistics:
        mine = select(func.count()).select_from(models.Task).where(models.Task.user_id == user_id)
        total = self.db.scalar(mine) or 0
        completed = self.db.scalar(mine.where(models.Task.is_completed.is_(True))) or 0
        return schemas.TaskStatistics(
            total=total, completed=completed, pending=total - completed
        )
