"""Domain models exposed for the task tracker."""

from __future__ import annotations

from .common import TimestampMixin
from .task import Task, TaskBase
from .user import User, UserBase

__all__ = [
    "Task",
    "TaskBase",
    "TimestampMixin",
    "User",
    "UserBase",
]
