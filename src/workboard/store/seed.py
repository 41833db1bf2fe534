# src/workboard/store/seed.py

"""
Fixed demo dataset loaded at startup: 5 users, 3 projects, 3 tasks.

Ids are stable so clients can reference seed entities (e.g. owner_id="user_001");
timestamps are placed relative to the startup time.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta

from ..core.models import Project, ProjectStatus, Task, TaskPriority, TaskStatus, User


@dataclass(frozen=True, slots=True)
class SeedData:
    users: tuple[User, ...]
    projects: tuple[Project, ...]
    tasks: tuple[Task, ...]


def seed_dataset(now: datetime) -> SeedData:
    def days_ago(n: int) -> datetime:
        return now - timedelta(days=n)

    users = (
        User(
            id="user_001",
            name="Alice Johnson",
            email="alice.johnson@example.com",
            role="Senior Full Stack Developer",
            created_at=days_ago(120),
        ),
        User(
            id="user_002",
            name="Bob Smith",
            email="bob.smith@example.com",
            role="UI/UX Designer",
            created_at=days_ago(95),
        ),
        User(
            id="user_003",
            name="Carol Williams",
            email="carol.williams@example.com",
            role="Project Manager",
            created_at=days_ago(80),
        ),
        User(
            id="user_004",
            name="David Brown",
            email="david.brown@example.com",
            role="Backend Developer",
            created_at=days_ago(60),
        ),
        User(
            id="user_005",
            name="Eva Martinez",
            email="eva.martinez@example.com",
            role="DevOps Engineer",
            created_at=days_ago(30),
            is_active=False,
        ),
    )

    projects = (
        Project(
            id="project_001",
            title="E-Commerce Platform",
            description="Online storefront with catalog, cart and checkout",
            status=ProjectStatus.IN_PROGRESS.value,
            owner_id="user_001",
            created_at=days_ago(45),
            technologies=("Rust", "PostgreSQL", "React"),
            progress=65,
        ),
        Project(
            id="project_002",
            title="Mobile Banking App",
            description="Cross-platform banking client with biometric login",
            status=ProjectStatus.PLANNING.value,
            owner_id="user_003",
            created_at=days_ago(10),
            technologies=("Flutter", "Go", "Redis"),
            progress=10,
        ),
        Project(
            id="project_003",
            title="Analytics Dashboard",
            description="Internal reporting dashboard for sales metrics",
            status=ProjectStatus.COMPLETED.value,
            owner_id="user_004",
            created_at=days_ago(90),
            technologies=("Python", "Vue.js", "ClickHouse"),
            progress=100,
        ),
    )

    tasks = (
        Task(
            id="task_001",
            project_id="project_001",
            title="Implement payment gateway",
            description="Integrate card payments into checkout",
            status=TaskStatus.IN_PROGRESS.value,
            priority=TaskPriority.HIGH.value,
            created_at=days_ago(20),
            assigned_to="user_004",
            due_date=now + timedelta(days=7),
        ),
        Task(
            id="task_002",
            project_id="project_001",
            title="Design product pages",
            description="Product listing and detail page layouts",
            status=TaskStatus.COMPLETED.value,
            priority=TaskPriority.MEDIUM.value,
            created_at=days_ago(40),
            assigned_to="user_002",
        ),
        Task(
            id="task_003",
            project_id="project_002",
            title="Gather requirements",
            description="Collect feature requirements from stakeholders",
            status=TaskStatus.TODO.value,
            priority=TaskPriority.HIGH.value,
            created_at=days_ago(5),
            due_date=now + timedelta(days=14),
        ),
    )

    return SeedData(users=users, projects=projects, tasks=tasks)
