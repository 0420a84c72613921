"""In-memory repositories implementing the store Protocols for handler tests."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class FakeTask:
    title: str
    completed: bool = False
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=_now)


@dataclass
class FakeSession:
    task_id: UUID
    duration: float
    start_time: datetime
    completed: bool = True
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=_now)


class FakeTaskRepository:
    def __init__(self):
        self.tasks: dict[UUID, FakeTask] = {}
        self.calls: list[str] = []

    async def add(self, title, completed):
        self.calls.append("add")
        task = FakeTask(title=title, completed=completed)
        self.tasks[task.id] = task
        return task

    async def list_all(self):
        self.calls.append("list_all")
        return list(self.tasks.values())

    async def get(self, task_id):
        self.calls.append("get")
        return self.tasks.get(task_id)

    async def update(self, task_id, fields):
        self.calls.append("update")
        task = self.tasks.get(task_id)
        if task is None:
            return None
        for name, value in fields.items():
            setattr(task, name, value)
        return task

    async def delete(self, task_id):
        self.calls.append("delete")
        return self.tasks.pop(task_id, None)


class FakeSessionRepository:
    def __init__(self, tasks: FakeTaskRepository):
        self.tasks = tasks
        self.sessions: list[FakeSession] = []

    async def add_for_task(self, task_id, duration, start_time, completed):
        if task_id not in self.tasks.tasks:
            return None
        session = FakeSession(task_id, duration, start_time, completed)
        self.sessions.append(session)
        return session

    async def list_with_tasks(self):
        return [(s, self.tasks.tasks.get(s.task_id)) for s in self.sessions]
