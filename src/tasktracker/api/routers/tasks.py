"""Routes handling task CRUD operations. Every route requires a bearer token."""

from __future__ import annotations

import logging
import uuid

from fastapi import APIRouter, Depends, status

from ...deps import IdentityDependency, TaskServiceDependency, log_authenticated_request
from ...errors import NotFoundError
from ...models import Task
from ...schemas import MessageResponse, TaskCreate, TaskRead, TaskUpdate

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/tasks",
    tags=["tasks"],
    dependencies=[Depends(log_authenticated_request)],
)

TASK_NOT_FOUND_MESSAGE = "No task was found with this id"


def _map_task(task: Task) -> TaskRead:
    return TaskRead.model_validate(task)


@router.post(
    "",
    response_model=TaskRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new task",
)
async def create_task(
    payload: TaskCreate,
    service: TaskServiceDependency,
    identity: IdentityDependency,
) -> TaskRead:
    task = await service.create_task(payload)
    logger.info(
        "Task created",
        extra={"task_id": str(task.id), "username": identity.username},
    )
    return _map_task(task)


@router.get("", response_model=list[TaskRead], summary="List all tasks")
async def list_tasks(service: TaskServiceDependency) -> list[TaskRead]:
    tasks = await service.list_tasks()
    return [_map_task(task) for task in tasks]


@router.get("/{task_id}", response_model=TaskRead, summary="Retrieve a task by id")
async def get_task(task_id: uuid.UUID, service: TaskServiceDependency) -> TaskRead:
    task = await service.get_task(task_id)
    if task is None:
        raise NotFoundError(TASK_NOT_FOUND_MESSAGE)
    return _map_task(task)


@router.put("/{task_id}", response_model=TaskRead, summary="Update an existing task")
async def update_task(
    task_id: uuid.UUID,
    payload: TaskUpdate,
    service: TaskServiceDependency,
) -> TaskRead:
    task = await service.update_task(
        task_id,
        title=payload.title,
        description=payload.description,
        completed=payload.completed,
    )
    if task is None:
        raise NotFoundError(TASK_NOT_FOUND_MESSAGE)
    return _map_task(task)


@router.delete("/{task_id}", response_model=MessageResponse, summary="Delete a task")
async def delete_task(task_id: uuid.UUID, service: TaskServiceDependency) -> MessageResponse:
    if not await service.delete_task(task_id):
        raise NotFoundError(TASK_NOT_FOUND_MESSAGE)
    return MessageResponse(message="Task Deleted Successfully!")
