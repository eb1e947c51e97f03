from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from tasktrack.models.task import TaskStatus
from tasktrack.schemas.common import CamelModel


class TaskCreate(BaseModel):
    # any client-supplied owner field is ignored; the owner is the caller
    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[TaskStatus] = None


class TaskUpdate(BaseModel):
    """Partial update. Only keys present in the body are applied."""

    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[TaskStatus] = None

    def changes(self) -> dict:
        return self.model_dump(include=self.model_fields_set)


class TaskRead(CamelModel):
    id: str
    title: str
    description: Optional[str] = None
    status: TaskStatus
    user_id: str
    created_at: datetime
    updated_at: datetime
