"""Task Routes — CRUD endpoints for /api/tasks.

Invariants:
    - Request bodies are validated by Pydantic before reaching the route handler
    - Path ids are parsed by the parse_task_id_path dependency; malformed ids are 404
    - Routes contain no business logic (delegate to TaskHandlers)
"""

from fastapi import APIRouter, Depends, status

from focustools.api.dependencies import get_task_handlers, parse_task_id_path
from focustools.core.domain_types import TaskId
from focustools.schemas.task import (
    TaskCreate, TaskDeletedResponse, TaskResponse, TaskUpdate,
)
from focustools.services.handle_tasks import TaskHandlers

router = APIRouter(prefix="/api/tasks", tags=["tasks"])


@router.post(
    "", response_model=TaskResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_task(
    body: TaskCreate, handlers: TaskHandlers = Depends(get_task_handlers),
):
    """Create a task."""
    return await handlers.create(body)


@router.get("", response_model=list[TaskResponse])
async def list_tasks(handlers: TaskHandlers = Depends(get_task_handlers)):
    """List every task."""
    return await handlers.list_all()


@router.get("/{task_id}", response_model=TaskResponse)
async def get_task(
    task_id: TaskId = Depends(parse_task_id_path),
    handlers: TaskHandlers = Depends(get_task_handlers),
):
    return await handlers.get(task_id)


@router.put("/{task_id}", response_model=TaskResponse)
async def update_task(
    body: TaskUpdate,
    task_id: TaskId = Depends(parse_task_id_path),
    handlers: TaskHandlers = Depends(get_task_handlers),
):
    """Partially update a task; omitted fields are left untouched."""
    return await handlers.update(task_id, body)


@router.delete("/{task_id}", response_model=TaskDeletedResponse)
async def delete_task(
    task_id: TaskId = Depends(parse_task_id_path),
    handlers: TaskHandlers = Depends(get_task_handlers),
):
    task = await handlers.delete(task_id)
    return TaskDeletedResponse(
        message="Task deleted successfully",
        task=TaskResponse.model_validate(task),
    )
