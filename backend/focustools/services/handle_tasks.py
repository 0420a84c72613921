"""Task Handlers — create, list, get, update, delete.

Invariants:
    - Handlers receive already-parsed TaskIds; parse_task_id maps a malformed
      path id to "not found" (404) before the request body is looked at
    - Update applies only the fields the client sent; an empty update is a read
    - Handlers raise typed errors (core/errors.py); they never build HTTP responses

Design Decisions:
    - Handlers depend on the TaskRepository Protocol, not on SQLAlchemy, so they run
      against fakes in tests
"""

import logging

from focustools.core.domain_types import TaskId, parse_identifier
from focustools.core.errors import TaskNotFoundError
from focustools.core.repository_protocols import TaskLike, TaskRepository
from focustools.schemas.task import TaskCreate, TaskUpdate

logger = logging.getLogger(__name__)


def parse_task_id(raw_id: str) -> TaskId:
    """Parse a path id or raise TaskNotFoundError (malformed ids are not found)."""
    task_id = parse_identifier(raw_id)
    if task_id is None:
        raise TaskNotFoundError.malformed(raw_id)
    return TaskId(task_id)


class TaskHandlers:
    """Task resource operations."""

    def __init__(self, repo: TaskRepository):
        self.repo = repo

    async def create(self, body: TaskCreate) -> TaskLike:
        task = await self.repo.add(body.title, body.completed)
        logger.info("Task created", extra={"task_id": task.id})
        return task

    async def list_all(self) -> list[TaskLike]:
        return await self.repo.list_all()

    async def get(self, task_id: TaskId) -> TaskLike:
        task = await self.repo.get(task_id)
        if task is None:
            raise TaskNotFoundError.for_id(str(task_id))
        return task

    async def update(self, task_id: TaskId, body: TaskUpdate) -> TaskLike:
        fields = body.updates()
        if not fields:
            return await self.get(task_id)
        task = await self.repo.update(task_id, fields)
        if task is None:
            raise TaskNotFoundError.for_id(str(task_id))
        logger.info(
            f"Task updated: {', '.join(sorted(fields))}",
            extra={"task_id": task.id},
        )
        return task

    async def delete(self, task_id: TaskId) -> TaskLike:
        task = await self.repo.delete(task_id)
        if task is None:
            raise TaskNotFoundError.for_id(str(task_id))
        # Sessions referencing this task are kept (weak reference)
        logger.info("Task deleted", extra={"task_id": task.id})
        return task
