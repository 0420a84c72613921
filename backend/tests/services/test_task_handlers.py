"""Task Handlers — business rules against an in-memory repository.

Invariants:
    - Malformed ids raise TaskNotFoundError at parse time, before any handler runs
    - Empty updates do not write
"""

from uuid import uuid4

import pytest

from focustools.core.domain_types import TaskId
from focustools.core.errors import TaskNotFoundError
from focustools.schemas.task import TaskCreate, TaskUpdate
from focustools.services.handle_tasks import TaskHandlers, parse_task_id

from tests.services.fakes import FakeTaskRepository


@pytest.fixture
def repo():
    return FakeTaskRepository()


@pytest.fixture
def handlers(repo):
    return TaskHandlers(repo)


async def test_create_passes_trimmed_title(handlers, repo):
    task = await handlers.create(TaskCreate(title="  Plan  "))

    assert task.title == "Plan"
    assert repo.tasks[task.id] is task


def test_parse_task_id_reports_invalid_format():
    with pytest.raises(TaskNotFoundError, match="Invalid task ID format"):
        parse_task_id("nope")


def test_parse_task_id_accepts_uuid_text():
    raw = uuid4()
    assert parse_task_id(f"  {raw} ") == raw


async def test_get_unknown_id(handlers):
    with pytest.raises(TaskNotFoundError, match="not found"):
        await handlers.get(TaskId(uuid4()))


async def test_empty_update_does_not_write(handlers, repo):
    task = await handlers.create(TaskCreate(title="Plan"))
    repo.calls.clear()

    result = await handlers.update(task.id, TaskUpdate())

    assert result is task
    assert "update" not in repo.calls


async def test_update_applies_fields(handlers):
    task = await handlers.create(TaskCreate(title="Plan"))

    result = await handlers.update(
        task.id, TaskUpdate.model_validate({"completed": True}),
    )

    assert result.completed is True
    assert result.title == "Plan"


async def test_delete_unknown_raises(handlers):
    with pytest.raises(TaskNotFoundError):
        await handlers.delete(TaskId(uuid4()))


def test_parse_task_id_rejects_malformed():
    with pytest.raises(TaskNotFoundError) as exc_info:
        parse_task_id("123")
    assert exc_info.value.task_id == "123"
