# app/actions/workouts.py
import logging
from typing import Any, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.actions.common import UNAUTHORIZED, WORKOUT_NOT_FOUND, failure, parse_input
from app.cache import DASHBOARD_PATH, Revalidator, workout_path
from app.repositories.workout_repo import WorkoutRepository
from app.schemas.workout import WorkoutCreate, WorkoutRead, WorkoutUpdate

log = logging.getLogger("uvicorn")

NOT_FOUND = WORKOUT_NOT_FOUND

def create_workout_action(
    data: Any,
    *,
    db: Session,
    user_id: Optional[str],
    revalidator: Revalidator,
) -> dict:
    """Start a new (in-progress) workout for the signed-in user."""
    if user_id is None:
        return failure(UNAUTHORIZED)

    payload, invalid = parse_input(WorkoutCreate, data)
    if invalid:
        return invalid

    try:
        workout = WorkoutRepository(db).create(
            user_id, name=payload.name, started_at=payload.started_at
        )
    except SQLAlchemyError:
        db.rollback()
        log.exception("Failed to create workout")
        return failure("Failed to create workout")

    revalidator.revalidate_path(DASHBOARD_PATH)
    return {"success": True, "workout": WorkoutRead.model_validate(workout)}

def update_workout_action(
    data: Any,
    *,
    db: Session,
    user_id: Optional[str],
    revalidator: Revalidator,
) -> dict:
    """Rename, reschedule, complete or reopen a workout.

    Only keys present in ``data`` are changed; ``completed_at: None``
    reopens a completed workout.
    """
    if user_id is None:
        return failure(UNAUTHORIZED)

    payload, invalid = parse_input(WorkoutUpdate, data)
    if invalid:
        return invalid

    try:
        workout = WorkoutRepository(db).update(payload.workout_id, payload, user_id)
    except SQLAlchemyError:
        db.rollback()
        log.exception("Failed to update workout")
        return failure("Failed to update workout")

    if not workout:
        return failure(NOT_FOUND)

    revalidator.revalidate_path(DASHBOARD_PATH)
    revalidator.revalidate_path(workout_path(payload.workout_id))
    return {"success": True, "workout": WorkoutRead.model_validate(workout)}
