"""Session ORM — persists one Pomodoro interval worked on a task.

Invariants:
    - task_id must name an existing Task at insert time (checked by the repository)
    - completed defaults to True (a logged session is finished unless stated)

Design Decisions:
    - task_id carries no ForeignKey: weak reference, deleting a Task leaves its
      sessions in place and listings render the raw id
    - Reference expansion done with an outer join in the repository, not relationship()
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Float, Index
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from focustools.db.base import Base


class Session(Base):
    """Pomodoro session — a recorded work interval linked to a Task."""
    __tablename__ = "sessions"
    __table_args__ = (Index("ix_sessions_task_id", "task_id"),)

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    task_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), nullable=False,
    )
    duration: Mapped[float] = mapped_column(Float, nullable=False)
    start_time: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
    )
    completed: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
