# src/workboard/store/store.py

from __future__ import annotations

import logging
import threading
import uuid
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import TypeVar

from ..core.models import Project, ProjectStatus, Task, TaskStatus, User
from ..core.ports import Clock, IdFactory
from ..errors import DuplicateIdError
from .stats import StatsSummary, compute_stats

logger = logging.getLogger(__name__)

E = TypeVar("E", User, Project, Task)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def new_uuid() -> str:
    return str(uuid.uuid4())


@dataclass(slots=True)
class _Collections:
    users: dict[str, User] = field(default_factory=dict)
    projects: dict[str, Project] = field(default_factory=dict)
    tasks: dict[str, Task] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class StoreSnapshot:
    """All three collections copied out under a single lock acquisition."""

    users: tuple[User, ...]
    projects: tuple[Project, ...]
    tasks: tuple[Task, ...]


class Store:
    """
    In-memory store for users, projects and tasks.

    Concurrency:
    - one lock guards all three collections together
    - every public method holds it for its whole duration, reads included
    - entities are frozen dataclasses, so copies handed out never need the lock

    Ordering of list_* results is unspecified.
    """

    def __init__(self, *, clock: Clock | None = None, id_factory: IdFactory | None = None) -> None:
        self._lock = threading.Lock()
        self._data = _Collections()
        self._now: Clock = clock or utc_now
        self._new_id: IdFactory = id_factory or new_uuid

    # ---- low-level helpers (call with the lock held) ----

    def _fresh_id(self, taken: dict[str, E]) -> str:
        while True:
            candidate = self._new_id()
            if candidate and candidate not in taken:
                return candidate

    @staticmethod
    def _check_new_ids(collection: str, existing: dict[str, E], items: list[E]) -> None:
        seen: set[str] = set()
        for item in items:
            if item.id in existing or item.id in seen:
                raise DuplicateIdError(collection, item.id)
            seen.add(item.id)

    # ---- bulk load ----

    def load(
        self,
        *,
        users: Iterable[User] = (),
        projects: Iterable[Project] = (),
        tasks: Iterable[Task] = (),
    ) -> None:
        """
        Insert prebuilt entities (seed data).

        All-or-nothing: a repeated or already present id raises DuplicateIdError
        and nothing is inserted.
        """
        users_l, projects_l, tasks_l = list(users), list(projects), list(tasks)

        with self._lock:
            self._check_new_ids("user", self._data.users, users_l)
            self._check_new_ids("project", self._data.projects, projects_l)
            self._check_new_ids("task", self._data.tasks, tasks_l)

            self._data.users.update((u.id, u) for u in users_l)
            self._data.projects.update((p.id, p) for p in projects_l)
            self._data.tasks.update((t.id, t) for t in tasks_l)

        logger.info(
            "Store loaded users=%d projects=%d tasks=%d",
            len(users_l),
            len(projects_l),
            len(tasks_l),
        )

    # ---- users ----

    def list_users(self) -> list[User]:
        with self._lock:
            return list(self._data.users.values())

    def create_user(self, *, name: str, email: str, role: str) -> User:
        with self._lock:
            user = User(
                id=self._fresh_id(self._data.users),
                name=name,
                email=email,
                role=role,
                created_at=self._now(),
                is_active=True,
            )
            self._data.users[user.id] = user
        logger.debug("Created user id=%s", user.id)
        return user

    # ---- projects ----

    def list_projects(self) -> list[Project]:
        with self._lock:
            return list(self._data.projects.values())

    def create_project(
        self,
        *,
        title: str,
        description: str,
        technologies: Iterable[str],
        owner_id: str,
    ) -> Project:
        techs = tuple(technologies)
        with self._lock:
            project = Project(
                id=self._fresh_id(self._data.projects),
                title=title,
                description=description,
                status=ProjectStatus.PLANNING.value,
                owner_id=owner_id,
                created_at=self._now(),
                technologies=techs,
                progress=0,
            )
            self._data.projects[project.id] = project
        logger.debug("Created project id=%s owner=%s", project.id, owner_id)
        return project

    # ---- tasks ----

    def list_tasks(self) -> list[Task]:
        with self._lock:
            return list(self._data.tasks.values())

    def create_task(
        self,
        *,
        project_id: str,
        title: str,
        description: str,
        priority: str,
        assigned_to: str | None = None,
        due_date: datetime | None = None,
    ) -> Task:
        with self._lock:
            task = Task(
                id=self._fresh_id(self._data.tasks),
                project_id=project_id,
                title=title,
                description=description,
                status=TaskStatus.TODO.value,
                priority=priority,
                created_at=self._now(),
                assigned_to=assigned_to,
                due_date=due_date,
            )
            self._data.tasks[task.id] = task
        logger.debug("Created task id=%s project=%s", task.id, project_id)
        return task

    # ---- aggregate reads ----

    def snapshot(self) -> StoreSnapshot:
        with self._lock:
            return StoreSnapshot(
                users=tuple(self._data.users.values()),
                projects=tuple(self._data.projects.values()),
                tasks=tuple(self._data.tasks.values()),
            )

    def counts(self) -> dict[str, int]:
        with self._lock:
            return {
                "users": len(self._data.users),
                "projects": len(self._data.projects),
                "tasks": len(self._data.tasks),
            }

    def stats(self) -> StatsSummary:
        return compute_stats(self.snapshot())
