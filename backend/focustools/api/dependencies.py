"""Request Dependencies — per-request store handles injected into routes.

Invariants:
    - Every request gets its own AsyncSession (get_db) and its own repository objects
    - Routes depend on these providers, never on the database manager directly

Design Decisions:
    - Providers are the override seam for tests (app.dependency_overrides)
    - Path ids are parsed here, as a dependency: FastAPI resolves dependencies
      before it reports body errors, so a malformed id is a 404 whatever the body
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from focustools.core.domain_types import TaskId
from focustools.core.repository_protocols import SessionRepository, TaskRepository
from focustools.infrastructure.database import get_db
from focustools.infrastructure.repositories import (
    SqlSessionRepository, SqlTaskRepository,
)
from focustools.services.handle_sessions import SessionHandlers
from focustools.services.handle_tasks import TaskHandlers, parse_task_id


def parse_task_id_path(task_id: str) -> TaskId:
    return parse_task_id(task_id)


def get_task_repository(db: AsyncSession = Depends(get_db)) -> TaskRepository:
    return SqlTaskRepository(db)


def get_session_repository(
    db: AsyncSession = Depends(get_db),
) -> SessionRepository:
    return SqlSessionRepository(db)


def get_task_handlers(
    repo: TaskRepository = Depends(get_task_repository),
) -> TaskHandlers:
    return TaskHandlers(repo)


def get_session_handlers(
    repo: SessionRepository = Depends(get_session_repository),
) -> SessionHandlers:
    return SessionHandlers(repo)
