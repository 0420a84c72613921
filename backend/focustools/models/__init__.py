"""ORM Models — SQLAlchemy declarative models for tasks and Pomodoro sessions.

Invariants:
    - All models inherit from Base (db/base.py)

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all/autogenerate
"""

from focustools.models.task import Task  # noqa: F401
from focustools.models.session import Session  # noqa: F401
