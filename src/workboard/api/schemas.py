# src/workboard/api/schemas.py

"""
Typed request bodies for create operations.

Decoding is strict: a missing field or a wrong JSON type (number for a string,
string for a list, ...) rejects the whole request. Unknown fields, including
client-supplied id/created_at, are ignored.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TypeVar

from pydantic import AwareDatetime, BaseModel, ConfigDict, ValidationError, field_validator

from ..errors import FieldError, RequestDecodeError


class _CreateRequest(BaseModel):
    model_config = ConfigDict(strict=True, extra="ignore", frozen=True)


class CreateUserRequest(_CreateRequest):
    name: str
    email: str
    role: str


class CreateProjectRequest(_CreateRequest):
    title: str
    description: str
    technologies: list[str]
    owner_id: str


class CreateTaskRequest(_CreateRequest):
    project_id: str
    title: str
    description: str
    priority: str
    assigned_to: str | None = None
    due_date: AwareDatetime | None = None

    @field_validator("due_date")
    @classmethod
    def _to_utc(cls, value: datetime | None) -> datetime | None:
        return value.astimezone(timezone.utc) if value is not None else None


R = TypeVar("R", bound=_CreateRequest)


def decode_request(model: type[R], body: bytes | str) -> R:
    """Parse a raw JSON body into `model` or raise RequestDecodeError."""
    try:
        return model.model_validate_json(body)
    except ValidationError as exc:
        details = [
            FieldError(
                field=".".join(str(part) for part in err["loc"]) or "body",
                message=err["msg"],
            )
            for err in exc.errors()
        ]
        raise RequestDecodeError(f"Invalid request body for {model.__name__}", details) from exc
