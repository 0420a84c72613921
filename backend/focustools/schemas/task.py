"""Task Schemas — Pydantic models with field-level validation for the task endpoints.

Invariants:
    - TaskCreate.title: required, stripped, non-empty
    - TaskCreate.completed: defaults to False (explicit null treated as omitted)
    - TaskUpdate: every field optional; a present title must be non-blank,
      a present completed must be a boolean (null rejected)

Design Decisions:
    - mode="before" model validator reports a missing title with the same message
      as a blank one, so clients see one error per mistake
    - TaskUpdate.updates() uses exclude_unset: omitted fields are left untouched
"""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import field_validator, model_validator

from focustools.schemas.base import CamelModel, CamelResponseModel


class TaskCreate(CamelModel):
    """Task creation — validates and trims the title."""
    title: str
    completed: bool = False

    @model_validator(mode="before")
    @classmethod
    def require_title(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("title") is None:
            raise ValueError("Title is required")
        return data

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Title is required")
        return v

    @field_validator("completed", mode="before")
    @classmethod
    def default_completed(cls, v: Any) -> Any:
        return False if v is None else v


class TaskUpdate(CamelModel):
    """Partial task update — only the fields sent are applied."""
    title: str | None = None
    completed: bool | None = None

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str | None) -> str:
        v = (v or "").strip()
        if not v:
            raise ValueError("Title cannot be empty")
        return v

    @field_validator("completed")
    @classmethod
    def reject_null_completed(cls, v: bool | None) -> bool:
        if v is None:
            raise ValueError("Completed must be true or false")
        return v

    def updates(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class TaskResponse(CamelResponseModel):
    """Task response — public-facing task data."""
    id: UUID
    title: str
    completed: bool
    created_at: datetime


class TaskDeletedResponse(CamelResponseModel):
    message: str
    task: TaskResponse
