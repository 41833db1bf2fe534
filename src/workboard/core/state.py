# src/workboard/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..store.store import Store


@dataclass
class AppState:
    # Store Settings on the state for easy access in the HTTP layer.
    settings: object

    store: Store
