# src/workboard/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the HTTP layer.

Route handlers depend on these Protocols instead of the concrete Store,
so tests can wire in any implementation.
"""

from datetime import datetime
from typing import Callable, Iterable, Protocol

from .models import Project, Task, User

Clock = Callable[[], datetime]
# Must return timezone-aware UTC datetimes.

IdFactory = Callable[[], str]


class WorkboardRepo(Protocol):
    def list_users(self) -> list[User]: ...
    def create_user(self, *, name: str, email: str, role: str) -> User: ...

    def list_projects(self) -> list[Project]: ...
    def create_project(
            self,
            *,
            title: str,
            description: str,
            technologies: Iterable[str],
            owner_id: str,
    ) -> Project: ...

    def list_tasks(self) -> list[Task]: ...
    def create_task(
            self,
            *,
            project_id: str,
            title: str,
            description: str,
            priority: str,
            assigned_to: str | None = None,
            due_date: datetime | None = None,
    ) -> Task: ...

    # Returns workboard.store.stats.StatsSummary (kept loose to avoid import coupling)
    def stats(self) -> object: ...
