from __future__ import annotations

import logging
from typing import Sequence

from sqlmodel import Session

from tasktrack.core.exceptions import ForbiddenError, NotFoundError, ValidationError
from tasktrack.db.repository import TaskRepository
from tasktrack.models.task import Task, TaskStatus
from tasktrack.schemas.task import TaskCreate, TaskUpdate

log = logging.getLogger(__name__)


class TaskService:
    """
    Task CRUD scoped to the requesting user.

    Lookups check existence first, then ownership: a missing id is
    NotFound, another user's task is Forbidden.
    """

    def __init__(self, db: Session):
        self._tasks = TaskRepository(db)

    def _owned(self, user_id: str, task_id: str, action: str) -> Task:
        task = self._tasks.get(task_id)
        if task is None:
            raise NotFoundError("Task not found")
        if task.user_id != user_id:
            log.warning("User %s denied %s on task %s", user_id, action, task_id)
            raise ForbiddenError(f"You do not have permission to {action} this task")
        return task

    def list_tasks(self, user_id: str) -> Sequence[Task]:
        return self._tasks.list_for_user(user_id)

    def get_task(self, user_id: str, task_id: str) -> Task:
        return self._owned(user_id, task_id, "access")

    def create_task(self, user_id: str, body: TaskCreate) -> Task:
        if not body.title or not body.title.strip():
            raise ValidationError("Title is required")
        return self._tasks.create(
            user_id=user_id,
            title=body.title,
            description=body.description,
            status=body.status or TaskStatus.TODO,
        )

    def update_task(self, user_id: str, task_id: str, body: TaskUpdate) -> Task:
        task = self._owned(user_id, task_id, "update")

        changes = body.changes()
        if "title" in changes and (changes["title"] is None or not changes["title"].strip()):
            raise ValidationError("Title cannot be empty")
        if "status" in changes and changes["status"] is None:
            raise ValidationError("Status cannot be null")

        return self._tasks.update(task, changes)

    def delete_task(self, user_id: str, task_id: str) -> None:
        task = self._owned(user_id, task_id, "delete")
        self._tasks.delete(task)
