"""
User and task stores over a SQLModel session.

Every task query is scoped by an owner id except the raw lookup by
primary key, which the task service needs to tell "missing" apart
from "someone else's".
"""

import logging
from datetime import datetime, timezone
from typing import Any, Optional, Sequence

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, col, select

from tasktrack.core.exceptions import ConflictError
from tasktrack.models.task import Task, TaskStatus
from tasktrack.models.user import User

log = logging.getLogger(__name__)

DUPLICATE_EMAIL_MESSAGE = "User with this email already exists"


class BaseRepository:
    def __init__(self, db: Session) -> None:
        self._db = db

    def _save(self, obj):
        self._db.add(obj)
        self._db.commit()
        self._db.refresh(obj)
        return obj


class UserRepository(BaseRepository):
    def get(self, user_id: str) -> Optional[User]:
        return self._db.get(User, user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        return self._db.exec(select(User).where(User.email == email)).first()

    def create(self, *, email: str, password_hash: str, name: Optional[str] = None) -> User:
        user = User(email=email, password_hash=password_hash, name=name)
        try:
            return self._save(user)
        except IntegrityError:
            # unique index on email is the source of truth under concurrent registration
            self._db.rollback()
            log.info("Duplicate registration rejected by unique constraint")
            raise ConflictError(DUPLICATE_EMAIL_MESSAGE)

    def delete(self, user: User) -> None:
        """Delete a user; owned tasks go with it (ORM cascade + ON DELETE CASCADE)."""
        self._db.delete(user)
        self._db.commit()


class TaskRepository(BaseRepository):
    def get(self, task_id: str) -> Optional[Task]:
        return self._db.get(Task, task_id)

    def list_for_user(self, user_id: str) -> Sequence[Task]:
        stmt = (
            select(Task)
            .where(Task.user_id == user_id)
            .order_by(col(Task.created_at).desc(), col(Task.id).desc())
        )
        return self._db.exec(stmt).all()

    def create(
        self,
        *,
        user_id: str,
        title: str,
        description: Optional[str] = None,
        status: TaskStatus = TaskStatus.TODO,
    ) -> Task:
        task = Task(user_id=user_id, title=title, description=description, status=status)
        return self._save(task)

    def update(self, task: Task, fields: dict[str, Any]) -> Task:
        for key, value in fields.items():
            setattr(task, key, value)
        task.updated_at = datetime.now(tz=timezone.utc)
        return self._save(task)

    def delete(self, task: Task) -> None:
        self._db.delete(task)
        self._db.commit()
