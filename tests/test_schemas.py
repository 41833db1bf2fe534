# tests/test_schemas.py

from __future__ import annotations

import json
from datetime import datetime, timezone

import pytest

from workboard.api.schemas import (
    CreateProjectRequest,
    CreateTaskRequest,
    CreateUserRequest,
    decode_request,
)
from workboard.errors import RequestDecodeError


def _fields(exc: RequestDecodeError) -> set[str]:
    return {d.field for d in exc.details}


def test_decode_user_ignores_unknown_and_server_fields() -> None:
    body = json.dumps(
        {
            "name": "Ann",
            "email": "ann@example.com",
            "role": "Developer",
            "id": "client-id",
            "created_at": "2020-01-01T00:00:00Z",
        }
    )
    req = decode_request(CreateUserRequest, body)
    assert (req.name, req.email, req.role) == ("Ann", "ann@example.com", "Developer")
    assert not hasattr(req, "id")


def test_missing_field_is_reported() -> None:
    with pytest.raises(RequestDecodeError) as excinfo:
        decode_request(CreateUserRequest, json.dumps({"name": "Ann", "role": "Dev"}))
    assert _fields(excinfo.value) == {"email"}


def test_wrong_types_are_rejected() -> None:
    with pytest.raises(RequestDecodeError) as excinfo:
        decode_request(CreateUserRequest, json.dumps({"name": 42, "email": "a@b", "role": "r"}))
    assert "name" in _fields(excinfo.value)

    with pytest.raises(RequestDecodeError) as excinfo:
        decode_request(
            CreateProjectRequest,
            json.dumps({"title": "T", "description": "D", "technologies": "Go", "owner_id": "u"}),
        )
    assert "technologies" in _fields(excinfo.value)

    with pytest.raises(RequestDecodeError) as excinfo:
        decode_request(
            CreateProjectRequest,
            json.dumps({"title": "T", "description": "D", "technologies": ["Go", 1], "owner_id": "u"}),
        )
    assert "technologies.1" in _fields(excinfo.value)


@pytest.mark.parametrize("body", [b"", b"{not json", b"[]", b"null", b'"text"'])
def test_non_object_bodies_are_rejected(body: bytes) -> None:
    with pytest.raises(RequestDecodeError) as excinfo:
        decode_request(CreateUserRequest, body)
    assert excinfo.value.details


def test_decode_project_keeps_technology_order() -> None:
    req = decode_request(
        CreateProjectRequest,
        json.dumps(
            {"title": "T", "description": "D", "technologies": ["Rust", "Go", "C"], "owner_id": "u"}
        ),
    )
    assert req.technologies == ["Rust", "Go", "C"]


def test_task_optional_fields_default_to_none() -> None:
    req = decode_request(
        CreateTaskRequest,
        json.dumps({"project_id": "p", "title": "t", "description": "d", "priority": "High"}),
    )
    assert req.assigned_to is None
    assert req.due_date is None


def test_task_due_date_is_normalized_to_utc() -> None:
    req = decode_request(
        CreateTaskRequest,
        json.dumps(
            {
                "project_id": "p",
                "title": "t",
                "description": "d",
                "priority": "High",
                "due_date": "2026-03-01T14:00:00+02:00",
            }
        ),
    )
    assert req.due_date == datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)
    assert req.due_date.utcoffset().total_seconds() == 0


def test_task_due_date_without_offset_is_rejected() -> None:
    with pytest.raises(RequestDecodeError) as excinfo:
        decode_request(
            CreateTaskRequest,
            json.dumps(
                {
                    "project_id": "p",
                    "title": "t",
                    "description": "d",
                    "priority": "High",
                    "due_date": "2026-03-01T14:00:00",
                }
            ),
        )
    assert "due_date" in _fields(excinfo.value)
