"""Session Handlers — log a Pomodoro session, list sessions with their tasks.

Invariants:
    - taskId in a request body must parse and resolve; otherwise 400, never 404
    - Existence check and insert happen in one repository call (one transaction)
"""

import logging

from focustools.core.domain_types import TaskId, parse_identifier
from focustools.core.errors import InputValidationError
from focustools.core.repository_protocols import (
    SessionLike, SessionRepository, TaskLike,
)
from focustools.schemas.session import SessionCreate

logger = logging.getLogger(__name__)


class SessionHandlers:
    """Pomodoro session resource operations."""

    def __init__(self, repo: SessionRepository):
        self.repo = repo

    async def create(self, body: SessionCreate) -> SessionLike:
        task_id = parse_identifier(body.task_id)
        if task_id is None:
            raise InputValidationError("Invalid task ID format", "taskId")

        session = await self.repo.add_for_task(
            TaskId(task_id), body.duration, body.start_time, body.completed,
        )
        if session is None:
            raise InputValidationError(
                f"Task with ID {body.task_id} does not exist", "taskId",
            )
        logger.info(
            "Session logged",
            extra={"session_id": session.id, "task_id": session.task_id},
        )
        return session

    async def list_with_tasks(self) -> list[tuple[SessionLike, TaskLike | None]]:
        return await self.repo.list_with_tasks()
