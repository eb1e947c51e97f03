"""Centralized SQLModel imports to ensure metadata is populated."""

from tasktrack.models.user import User
from tasktrack.models.task import Task, TaskStatus

__all__ = ["User", "Task", "TaskStatus"]
