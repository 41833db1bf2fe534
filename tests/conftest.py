# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from workboard.api.app import create_app
from workboard.cli.bootstrap import create_initial_state
from workboard.core.state import AppState
from workboard.store.store import Store

from .fakes import FixedClock, SequentialIds


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the app factory.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="workboard-test",
        log_level="DEBUG",
        host="127.0.0.1",
        port=0,
        cors_origin="*",
        seed_data=True,
        task_create_enabled=False,
        data_dir=tmp_path / "data",
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """AppState built by the real composition root (seeded store)."""
    return create_initial_state(settings=settings)


@pytest.fixture()
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture()
def empty_store(clock: FixedClock) -> Store:
    """Unseeded store with deterministic time and ids."""
    return Store(clock=clock, id_factory=SequentialIds())


@pytest.fixture()
def app(state: AppState):
    app = create_app(state)
    app.config["TESTING"] = True
    return app


@pytest.fixture()
def client(app):
    """Create a Flask test client."""
    with app.test_client() as c:
        yield c
