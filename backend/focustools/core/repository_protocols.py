"""Boundary Protocols — the store contract between services and infrastructure.

Invariants:
    - Services NEVER import SQLAlchemy — they see only these Protocols
    - Every store failure surfaces as DatabaseError (core/errors.py)
    - Missing records are reported as None, never as exceptions

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - TaskLike/SessionLike describe the records returned so services and schemas
      are not coupled to the ORM classes
"""

from datetime import datetime
from typing import Any, Protocol

from focustools.core.domain_types import TaskId


class TaskLike(Protocol):
    """Structural contract for stored Task records."""
    id: Any
    title: str
    completed: bool
    created_at: datetime


class SessionLike(Protocol):
    """Structural contract for stored Session records."""
    id: Any
    task_id: Any
    duration: float
    start_time: datetime
    completed: bool
    created_at: datetime


class TaskRepository(Protocol):
    """Contract for task persistence."""
    async def add(self, title: str, completed: bool) -> TaskLike: ...
    async def list_all(self) -> list[TaskLike]: ...
    async def get(self, task_id: TaskId) -> TaskLike | None: ...
    async def update(
        self, task_id: TaskId, fields: dict[str, Any],
    ) -> TaskLike | None: ...
    async def delete(self, task_id: TaskId) -> TaskLike | None: ...


class SessionRepository(Protocol):
    """Contract for Pomodoro session persistence."""
    async def add_for_task(
        self,
        task_id: TaskId,
        duration: float,
        start_time: datetime,
        completed: bool,
    ) -> SessionLike | None:
        """Insert a session if the task exists; None when it does not."""
        ...

    async def list_with_tasks(
        self,
    ) -> list[tuple[SessionLike, TaskLike | None]]:
        """All sessions paired with their referenced task (None if gone)."""
        ...
