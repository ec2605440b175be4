"""Task-related Pydantic schemas."""

from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator

TASK_READ_EXAMPLE = {
    "id": "0f8fad5b-d9cb-469f-a165-70867728950e",
    "title": "DRAFT PRODUCT DOCUMENTATION",
    "description": "OUTLINE SECTIONS FOR THE PUBLIC API GUIDE.",
    "completed": False,
    "created_at": "2023-01-01T12:00:00Z",
    "updated_at": "2023-01-02T08:30:00Z",
}


class TaskCreate(BaseModel):
    """Payload for creating a new task."""

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={
            "example": {
                "title": "Draft product documentation",
                "description": "Outline sections for the public API guide.",
            }
        },
    )

    title: str = Field(min_length=1, max_length=255)
    description: str = Field(default="")


class TaskUpdate(BaseModel):
    """Payload for updating an existing task. ``completed`` must always be sent."""

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={
            "example": {
                "title": "Update API documentation",
                "completed": True,
            }
        },
    )

    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = Field(default=None)
    completed: bool

    @model_validator(mode="after")
    def _reject_explicit_null_title(self) -> "TaskUpdate":
        if "title" in self.model_fields_set and self.title is None:
            raise ValueError("title cannot be null.")
        return self


class TaskRead(BaseModel):
    """Public representation of a task."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={"example": TASK_READ_EXAMPLE},
    )

    id: uuid.UUID
    title: str
    description: str
    completed: bool
    created_at: datetime
    updated_at: datetime


__all__ = ["TaskCreate", "TaskRead", "TaskUpdate"]
