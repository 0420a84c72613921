"""Session Schemas — Pydantic models for logging and listing Pomodoro sessions.

Invariants:
    - taskId, duration, startTime are required; checked in that order and
      reported one at a time
    - duration must be strictly positive; a zero duration counts as missing
    - startTime must parse as ISO-8601
    - completed defaults to True (explicit null treated as omitted)
    - taskId stays a raw string here: its format is checked by the service so a
      malformed id is reported as such, not as a generic type error

Design Decisions:
    - SessionWithTaskResponse.task_id is a union: the full Task when the reference
      resolves, the bare id when the Task has since been deleted
"""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import Field, field_validator, model_validator

from focustools.schemas.base import CamelModel, CamelResponseModel
from focustools.schemas.task import TaskResponse

_REQUIRED_FIELDS = (
    ("taskId", "Task ID is required"),
    ("duration", "Duration is required"),
    ("startTime", "Start time is required"),
)


def _is_missing(key: str, value: Any) -> bool:
    if value is None or value == "":
        return True
    return key == "duration" and value == 0


class SessionCreate(CamelModel):
    """Session creation — required fields, positive duration."""
    task_id: str
    duration: float = Field(gt=0)
    start_time: datetime
    completed: bool = True

    @model_validator(mode="before")
    @classmethod
    def require_fields(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        for key, message in _REQUIRED_FIELDS:
            if _is_missing(key, data.get(key)):
                raise ValueError(message)
        return data

    @field_validator("completed", mode="before")
    @classmethod
    def default_completed(cls, v: Any) -> Any:
        return True if v is None else v


class SessionResponse(CamelResponseModel):
    """Session response — a single logged Pomodoro."""
    id: UUID
    task_id: UUID
    duration: float
    start_time: datetime
    completed: bool
    created_at: datetime


class SessionWithTaskResponse(SessionResponse):
    """Session with its task reference expanded."""
    task_id: TaskResponse | UUID

    @classmethod
    def from_records(cls, session: Any, task: Any | None) -> "SessionWithTaskResponse":
        return cls(
            id=session.id,
            task_id=(
                TaskResponse.model_validate(task) if task is not None
                else session.task_id
            ),
            duration=session.duration,
            start_time=session.start_time,
            completed=session.completed,
            created_at=session.created_at,
        )
