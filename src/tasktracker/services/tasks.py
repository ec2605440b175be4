"""Service layer encapsulating task-related operations."""

from __future__ import annotations

import logging
import uuid

from sqlmodel.ext.asyncio.session import AsyncSession

from ..models import Task
from ..repositories import TaskRepository
from ..schemas.task import TaskCreate

logger = logging.getLogger(__name__)


def uppercase_task_fields(payload: TaskCreate) -> TaskCreate:
    """Return a copy of ``payload`` with its title and description upper-cased."""
    return payload.model_copy(
        update={
            "title": payload.title.upper(),
            "description": payload.description.upper(),
        }
    )


class TaskService:
    """High-level business orchestration for ``Task`` entities."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session
        self._repository = TaskRepository(session)

    @property
    def repository(self) -> TaskRepository:
        """Expose the underlying repository for advanced scenarios."""
        return self._repository

    async def create_task(self, payload: TaskCreate) -> Task:
        """Persist a new, not yet completed task with upper-cased text fields."""
        normalised = uppercase_task_fields(payload)
        task = Task(title=normalised.title, description=normalised.description)
        await self._repository.add(task)
        await self._session.commit()
        await self._repository.refresh(task)
        logger.debug("Task created", extra={"task_id": str(task.id), "title": task.title})
        return task

    async def get_task(self, task_id: uuid.UUID) -> Task | None:
        """Retrieve a task by primary key."""
        return await self._repository.get(task_id)

    async def list_tasks(self) -> list[Task]:
        return await self._repository.list_ordered()

    async def update_task(
        self,
        task_id: uuid.UUID,
        *,
        completed: bool,
        title: str | None = None,
        description: str | None = None,
    ) -> Task | None:
        """Apply updates to a task, returning ``None`` when it does not exist."""
        task = await self._repository.get(task_id)
        if task is None:
            return None
        if title is not None:
            task.title = title
        if description is not None:
            task.description = description
        task.completed = completed
        self._session.add(task)
        await self._session.commit()
        await self._repository.refresh(task)
        return task

    async def delete_task(self, task_id: uuid.UUID) -> bool:
        """Delete a task by ID, returning ``True`` iff a record was removed."""
        task = await self._repository.get(task_id)
        if task is None:
            return False
        await self._repository.delete(task)
        await self._session.commit()
        return True


__all__ = ["TaskService", "uppercase_task_fields"]
