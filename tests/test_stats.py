# tests/test_stats.py

from __future__ import annotations

from workboard.cli.bootstrap import create_store
from workboard.core.models import Project, Task
from workboard.store.store import Store

from .fakes import FixedClock


def test_seed_stats_exact_counts() -> None:
    summary = create_store().stats().to_dict()

    assert summary == {
        "users": {
            "total": 5,
            "active": 4,
            "roles": {"developers": 2, "designers": 1, "managers": 1},
        },
        "projects": {"total": 3, "in_progress": 1, "completed": 1, "planning": 1},
        "tasks": {"total": 3, "completed": 1, "in_progress": 1, "todo": 1},
    }


def test_stats_are_idempotent_without_mutation() -> None:
    store = create_store()
    assert store.stats() == store.stats()


def test_stats_follow_new_entities(empty_store: Store) -> None:
    empty_store.create_user(name="a", email="a@example.com", role="Senior Full Stack Developer")
    empty_store.create_user(name="b", email="b@example.com", role="UI/UX Designer")
    empty_store.create_project(title="t", description="d", technologies=[], owner_id="a")
    empty_store.create_task(project_id="p", title="t", description="d", priority="High")

    s = empty_store.stats()

    assert s.users.total == 2
    assert s.users.active == 2
    assert s.users.roles.developers == 1
    assert s.users.roles.designers == 1
    assert s.users.roles.managers == 0
    assert s.projects.planning == 1
    assert s.tasks.todo == 1


def test_role_buckets_overlap_and_are_case_sensitive(empty_store: Store) -> None:
    empty_store.create_user(name="a", email="a@example.com", role="Developer Relations Manager")
    empty_store.create_user(name="b", email="b@example.com", role="junior developer")
    empty_store.create_user(name="c", email="c@example.com", role="Data Scientist")

    roles = empty_store.stats().users.roles

    # "Developer Relations Manager" lands in two buckets; the lowercase and
    # unrelated roles land in none.
    assert roles.developers == 1
    assert roles.managers == 1
    assert roles.designers == 0


def test_unknown_statuses_count_only_in_totals(empty_store: Store, clock: FixedClock) -> None:
    empty_store.load(
        projects=[
            Project(
                id="p1",
                title="t",
                description="d",
                status="On Hold",
                owner_id="u",
                created_at=clock.now,
            ),
            Project(
                id="p2",
                title="t",
                description="d",
                status="in progress",
                owner_id="u",
                created_at=clock.now,
            ),
        ],
        tasks=[
            Task(
                id="t1",
                project_id="p1",
                title="t",
                description="d",
                status="Blocked",
                priority="High",
                created_at=clock.now,
            ),
        ],
    )

    s = empty_store.stats()

    assert s.projects.total == 2
    assert (s.projects.in_progress, s.projects.completed, s.projects.planning) == (0, 0, 0)
    assert s.tasks.total == 1
    assert (s.tasks.completed, s.tasks.in_progress, s.tasks.todo) == (0, 0, 0)


def test_empty_store_stats_are_zero(empty_store: Store) -> None:
    s = empty_store.stats().to_dict()
    assert s["users"]["total"] == 0
    assert s["users"]["roles"] == {"developers": 0, "designers": 0, "managers": 0}
    assert s["projects"]["total"] == 0
    assert s["tasks"]["total"] == 0
