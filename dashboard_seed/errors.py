"""Centralized error types and the standard API error schema.

Provides:
- error_payload(...) -> dict: {"error": {"code": str, "message": str, "details": ...}}
- SeedError and subclasses raised by the seed orchestrator
"""
from __future__ import annotations

from typing import Any, Optional

from fastapi.encoders import jsonable_encoder


def error_payload(code: str, message: str, details: Optional[Any] = None) -> dict:
    payload: dict = {"error": {"code": code, "message": message}}
    if details is not None:
        payload["error"]["details"] = details
    # Use FastAPI's jsonable_encoder to safely convert potential exception objects
    return jsonable_encoder(payload)


class SeedError(Exception):
    """Seeding failed and the transaction was rolled back."""

    code = "seed_failed"

    def __init__(self, message: str, details: Optional[dict] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_payload(self) -> dict:
        return error_payload(self.code, self.message, self.details)


class SeedSetupError(SeedError):
    """Extension or table creation failed."""

    code = "seed_setup_failed"


class SeedConstraintError(SeedError):
    """A row violated a constraint that conflict-skip does not cover."""

    code = "seed_constraint_violation"


__all__ = [
    "error_payload",
    "SeedError",
    "SeedSetupError",
    "SeedConstraintError",
]
