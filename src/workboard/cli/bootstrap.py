# src/workboard/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- builds the Store and loads the seed dataset into it,
- wires everything into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..store.seed import seed_dataset
from ..store.store import Store, utc_now

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)


def create_store(*, seed: bool = True) -> Store:
    store = Store()
    if seed:
        data = seed_dataset(utc_now())
        store.load(users=data.users, projects=data.projects, tasks=data.tasks)
    return store


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    store = create_store(seed=bool(getattr(settings, "seed_data", True)))
    counts = store.counts()
    logger.info(
        "Store ready users=%d projects=%d tasks=%d",
        counts["users"],
        counts["projects"],
        counts["tasks"],
    )

    return AppState(settings=settings, store=store)
