# src/workboard/core/models.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from typing import Any


class ProjectStatus(StrEnum):
    """
    Well-known project statuses.

    Project.status is a plain string: values outside this set are stored as-is
    and simply fall into no stats bucket.
    """

    PLANNING = "Planning"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"


class TaskStatus(StrEnum):
    TODO = "Todo"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"


class TaskPriority(StrEnum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


def _ts(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


@dataclass(frozen=True, slots=True)
class User:
    id: str
    name: str
    email: str
    role: str
    created_at: datetime
    is_active: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "role": self.role,
            "created_at": _ts(self.created_at),
            "is_active": self.is_active,
        }


@dataclass(frozen=True, slots=True)
class Project:
    id: str
    title: str
    description: str
    status: str
    owner_id: str  # soft reference to User.id
    created_at: datetime
    technologies: tuple[str, ...] = field(default_factory=tuple)
    progress: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "status": self.status,
            "owner_id": self.owner_id,
            "created_at": _ts(self.created_at),
            "technologies": list(self.technologies),
            "progress": self.progress,
        }


@dataclass(frozen=True, slots=True)
class Task:
    id: str
    project_id: str  # soft reference to Project.id
    title: str
    description: str
    status: str
    priority: str
    created_at: datetime
    assigned_to: str | None = None  # soft reference to User.id
    due_date: datetime | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "project_id": self.project_id,
            "title": self.title,
            "description": self.description,
            "status": self.status,
            "priority": self.priority,
            "assigned_to": self.assigned_to,
            "created_at": _ts(self.created_at),
            "due_date": _ts(self.due_date),
        }
