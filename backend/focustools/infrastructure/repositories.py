"""SQLAlchemy Repositories — store implementations of core/repository_protocols.py.

Invariants:
    - Every operation runs inside translate_db_errors (SQLAlchemy never leaks upward)
    - Each write commits its own transaction; no transaction spans two repository calls
    - Missing rows return None; services decide the HTTP meaning

Design Decisions:
    - add_for_task checks the Task and inserts the Session in ONE transaction, reading
      the Task row FOR UPDATE so a concurrent delete waits (PostgreSQL); SQLite
      ignores the lock clause and the race is accepted there
    - list_with_tasks is an outer join: sessions whose task was deleted still list
"""

import logging
from datetime import datetime
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from focustools.core.domain_types import TaskId
from focustools.infrastructure.database import translate_db_errors
from focustools.models.session import Session as SessionModel
from focustools.models.task import Task as TaskModel

logger = logging.getLogger(__name__)

_UPDATABLE_TASK_FIELDS = frozenset({"title", "completed"})


class SqlTaskRepository:
    """Task persistence over an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def add(self, title: str, completed: bool) -> TaskModel:
        task = TaskModel(title=title, completed=completed)
        async with translate_db_errors(self._db, "insert"):
            self._db.add(task)
            await self._db.commit()
            await self._db.refresh(task)
        return task

    async def list_all(self) -> list[TaskModel]:
        async with translate_db_errors(self._db, "query"):
            result = await self._db.execute(
                select(TaskModel).order_by(TaskModel.created_at),
            )
            return list(result.scalars().all())

    async def get(self, task_id: TaskId) -> TaskModel | None:
        async with translate_db_errors(self._db, "query"):
            return await self._db.get(TaskModel, task_id)

    async def update(
        self, task_id: TaskId, fields: dict[str, Any],
    ) -> TaskModel | None:
        unknown = set(fields) - _UPDATABLE_TASK_FIELDS
        if unknown:
            raise ValueError(f"Task fields not updatable: {sorted(unknown)}")
        async with translate_db_errors(self._db, "update"):
            task = await self._db.get(TaskModel, task_id)
            if task is None:
                return None
            for name, value in fields.items():
                setattr(task, name, value)
            await self._db.commit()
            await self._db.refresh(task)
            return task

    async def delete(self, task_id: TaskId) -> TaskModel | None:
        async with translate_db_errors(self._db, "delete"):
            task = await self._db.get(TaskModel, task_id)
            if task is None:
                return None
            await self._db.delete(task)
            await self._db.commit()
            return task


class SqlSessionRepository:
    """Pomodoro session persistence over an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def add_for_task(
        self,
        task_id: TaskId,
        duration: float,
        start_time: datetime,
        completed: bool,
    ) -> SessionModel | None:
        async with translate_db_errors(self._db, "insert"):
            result = await self._db.execute(
                select(TaskModel.id)
                .where(TaskModel.id == task_id)
                .with_for_update(),
            )
            if result.scalar_one_or_none() is None:
                await self._db.rollback()
                return None
            session = SessionModel(
                task_id=task_id,
                duration=duration,
                start_time=start_time,
                completed=completed,
            )
            self._db.add(session)
            await self._db.commit()
            await self._db.refresh(session)
            return session

    async def list_with_tasks(
        self,
    ) -> list[tuple[SessionModel, TaskModel | None]]:
        async with translate_db_errors(self._db, "query"):
            result = await self._db.execute(
                select(SessionModel, TaskModel)
                .outerjoin(TaskModel, TaskModel.id == SessionModel.task_id)
                .order_by(SessionModel.created_at),
            )
            return [(session, task) for session, task in result.all()]
