# app/actions/common.py
"""Shared plumbing for the mutation actions.

Every action returns a plain dict, either ``{"success": True, <entity>: ...}``
or ``{"success": False, "error": <message>}`` with an optional ``details``
key carrying field-level validation errors. Raw storage errors never leave
this package.
"""
from __future__ import annotations
from typing import Any, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel, ValidationError

M = TypeVar("M", bound=BaseModel)

UNAUTHORIZED = "Unauthorized"
INVALID_INPUT = "Invalid input"

def failure(error: str, **extra: Any) -> dict:
    return {"success": False, "error": error, **extra}

def validation_details(exc: ValidationError) -> dict:
    form_errors: list[str] = []
    field_errors: dict[str, list[str]] = {}
    for err in exc.errors():
        loc = err.get("loc") or ()
        if loc:
            field_errors.setdefault(str(loc[0]), []).append(err["msg"])
        else:
            form_errors.append(err["msg"])
    return {"form_errors": form_errors, "field_errors": field_errors}

def parse_input(schema: Type[M], data: Any) -> Tuple[Optional[M], Optional[dict]]:
    """Validate ``data`` against ``schema``; returns (model, None) or (None, failure)."""
    try:
        return schema.model_validate(data), None
    except ValidationError as e:
        return None, failure(INVALID_INPUT, details=validation_details(e))

def conflict(field: str, message: str) -> dict:
    return failure(INVALID_INPUT, details={"form_errors": [], "field_errors": {field: [message]}})

WORKOUT_NOT_FOUND = "Workout not found or you do not have permission to edit it"
WORKOUT_OR_EXERCISE_NOT_FOUND = "Workout or exercise not found or you do not have permission to edit it"
EXERCISE_NOT_FOUND = "Exercise not found or you do not have permission to edit it"

# Ownership failures and missing rows share these messages
NOT_FOUND_ERRORS = frozenset({WORKOUT_NOT_FOUND, WORKOUT_OR_EXERCISE_NOT_FOUND, EXERCISE_NOT_FOUND})
