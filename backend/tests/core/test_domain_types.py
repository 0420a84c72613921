"""Domain Types — identifier wrappers and parsing.

Tests:
    - parse_identifier accepts canonical and hex UUID text
    - Anything else (wrong length, non-hex, non-string) is None, never an exception
"""

from uuid import UUID, uuid4

import pytest

from focustools.core.domain_types import TaskId, parse_identifier


def test_task_id_wraps_uuid():
    uid = uuid4()
    assert TaskId(uid) == uid


def test_parse_canonical_uuid():
    uid = uuid4()
    assert parse_identifier(str(uid)) == uid


def test_parse_hex_uuid_without_dashes():
    uid = uuid4()
    assert parse_identifier(uid.hex) == uid


def test_parse_passes_uuid_through():
    uid = uuid4()
    assert parse_identifier(uid) is uid


@pytest.mark.parametrize(
    "raw",
    ["", "abc", "123", "not-a-uuid", "507f1f77bcf86cd799439011", "z" * 32, None, 42],
)
def test_malformed_identifiers_return_none(raw):
    assert parse_identifier(raw) is None


def test_parse_returns_uuid_instance():
    assert isinstance(parse_identifier(str(uuid4())), UUID)
