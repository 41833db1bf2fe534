# src/workboard/api/envelope.py

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Protocol


class _Serializable(Protocol):
    def to_dict(self) -> dict[str, Any]: ...


@dataclass(frozen=True, slots=True)
class ApiResponse:
    """Uniform response envelope: {success, message, data, total}."""

    success: bool
    message: str
    data: Any = None
    total: int | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": self.success,
            "message": self.message,
            "data": self.data,
            "total": self.total,
        }


def listed(items: Sequence[_Serializable], message: str) -> ApiResponse:
    data = [item.to_dict() for item in items]
    return ApiResponse(success=True, message=message, data=data, total=len(data))


def single(item: _Serializable, message: str) -> ApiResponse:
    return ApiResponse(success=True, message=message, data=item.to_dict())
