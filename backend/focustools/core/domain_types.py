"""Domain Types — identifier types and parsing shared by every layer.

Invariants:
    - TaskId wraps a UUID — never pass bare strings into repositories
    - parse_identifier() is the only place raw path/body ids become UUIDs

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - parse_identifier returns None instead of raising: callers decide whether a
      malformed id means 404 (lookup paths) or 400 (references in request bodies)
"""

from typing import NewType
from uuid import UUID


TaskId = NewType("TaskId", UUID)


def parse_identifier(raw: object) -> UUID | None:
    """Parse a store identifier, returning None when it is not a valid UUID."""
    if isinstance(raw, UUID):
        return raw
    if not isinstance(raw, str):
        return None
    try:
        return UUID(raw.strip())
    except ValueError:
        return None
