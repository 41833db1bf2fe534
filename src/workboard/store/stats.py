# src/workboard/store/stats.py

"""
Aggregate statistics over one Store snapshot.

All counters are exact: role buckets use case-sensitive substring matching and
may overlap; status buckets use exact string equality, so unknown statuses are
counted only in the totals.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ..core.models import ProjectStatus, TaskStatus

if TYPE_CHECKING:
    from .store import StoreSnapshot

ROLE_DEVELOPER = "Developer"
ROLE_DESIGNER = "Designer"
ROLE_MANAGER = "Manager"


@dataclass(frozen=True, slots=True)
class RoleStats:
    developers: int
    designers: int
    managers: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "developers": self.developers,
            "designers": self.designers,
            "managers": self.managers,
        }


@dataclass(frozen=True, slots=True)
class UserStats:
    total: int
    active: int
    roles: RoleStats

    def to_dict(self) -> dict[str, Any]:
        return {"total": self.total, "active": self.active, "roles": self.roles.to_dict()}


@dataclass(frozen=True, slots=True)
class ProjectStats:
    total: int
    in_progress: int
    completed: int
    planning: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "in_progress": self.in_progress,
            "completed": self.completed,
            "planning": self.planning,
        }


@dataclass(frozen=True, slots=True)
class TaskStats:
    total: int
    completed: int
    in_progress: int
    todo: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "completed": self.completed,
            "in_progress": self.in_progress,
            "todo": self.todo,
        }


@dataclass(frozen=True, slots=True)
class StatsSummary:
    users: UserStats
    projects: ProjectStats
    tasks: TaskStats

    def to_dict(self) -> dict[str, Any]:
        return {
            "users": self.users.to_dict(),
            "projects": self.projects.to_dict(),
            "tasks": self.tasks.to_dict(),
        }


def compute_stats(snapshot: StoreSnapshot) -> StatsSummary:
    users = snapshot.users
    projects = snapshot.projects
    tasks = snapshot.tasks

    user_stats = UserStats(
        total=len(users),
        active=sum(1 for u in users if u.is_active),
        roles=RoleStats(
            developers=sum(1 for u in users if ROLE_DEVELOPER in u.role),
            designers=sum(1 for u in users if ROLE_DESIGNER in u.role),
            managers=sum(1 for u in users if ROLE_MANAGER in u.role),
        ),
    )

    project_stats = ProjectStats(
        total=len(projects),
        in_progress=sum(1 for p in projects if p.status == ProjectStatus.IN_PROGRESS),
        completed=sum(1 for p in projects if p.status == ProjectStatus.COMPLETED),
        planning=sum(1 for p in projects if p.status == ProjectStatus.PLANNING),
    )

    task_stats = TaskStats(
        total=len(tasks),
        completed=sum(1 for t in tasks if t.status == TaskStatus.COMPLETED),
        in_progress=sum(1 for t in tasks if t.status == TaskStatus.IN_PROGRESS),
        todo=sum(1 for t in tasks if t.status == TaskStatus.TODO),
    )

    return StatsSummary(users=user_stats, projects=project_stats, tasks=task_stats)
