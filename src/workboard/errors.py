# src/workboard/errors.py

from __future__ import annotations

from dataclasses import dataclass


class WorkboardError(Exception):
    """Base class for all project errors."""


class StoreError(WorkboardError):
    pass


class DuplicateIdError(StoreError):
    def __init__(self, collection: str, entity_id: str) -> None:
        super().__init__(f"duplicate {collection} id: {entity_id}")
        self.collection = collection
        self.entity_id = entity_id


@dataclass(frozen=True, slots=True)
class FieldError:
    field: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message}


class RequestDecodeError(WorkboardError):
    """
    Request body could not be decoded into the expected request shape.

    Raised before any Store operation runs, so a rejected request never mutates state.
    """

    def __init__(self, message: str, details: list[FieldError] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = list(details or [])
