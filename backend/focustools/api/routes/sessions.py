"""Session Routes — log and list Pomodoro sessions under /api/sessions.

Invariants:
    - POST returns the stored session with taskId as a plain id
    - GET expands every taskId to its Task when the Task still exists
"""

from fastapi import APIRouter, Depends, status

from focustools.api.dependencies import get_session_handlers
from focustools.schemas.session import (
    SessionCreate, SessionResponse, SessionWithTaskResponse,
)
from focustools.services.handle_sessions import SessionHandlers

router = APIRouter(prefix="/api/sessions", tags=["sessions"])


@router.post(
    "", response_model=SessionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_session(
    body: SessionCreate,
    handlers: SessionHandlers = Depends(get_session_handlers),
):
    """Log a Pomodoro session against an existing task."""
    return await handlers.create(body)


@router.get("", response_model=list[SessionWithTaskResponse])
async def list_sessions(
    handlers: SessionHandlers = Depends(get_session_handlers),
):
    """List every session with its task expanded."""
    rows = await handlers.list_with_tasks()
    return [
        SessionWithTaskResponse.from_records(session, task)
        for session, task in rows
    ]
