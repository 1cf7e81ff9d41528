# app/actions/exercises.py
import logging
from typing import Any, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.actions.common import (
    EXERCISE_NOT_FOUND,
    UNAUTHORIZED,
    WORKOUT_OR_EXERCISE_NOT_FOUND,
    conflict,
    failure,
    parse_input,
)
from app.cache import Revalidator, workout_path
from app.repositories.exercise_repo import ExerciseRepository
from app.repositories.set_repo import SetRepository
from app.repositories.workout_exercise_repo import WorkoutExerciseRepository
from app.schemas.exercise import ExerciseCreate, ExerciseRead, WorkoutExerciseCreate, WorkoutExerciseRead
from app.schemas.exercise_set import SetCreate, SetRead

log = logging.getLogger("uvicorn")

def create_exercise_action(data: Any, *, db: Session, user_id: Optional[str]) -> dict:
    if user_id is None:
        return failure(UNAUTHORIZED)

    payload, invalid = parse_input(ExerciseCreate, data)
    if invalid:
        return invalid

    try:
        exercise = ExerciseRepository(db).create(user_id, name=payload.name)
    except SQLAlchemyError:
        db.rollback()
        log.exception("Failed to create exercise")
        return failure("Failed to create exercise")
    return {"success": True, "exercise": ExerciseRead.model_validate(exercise)}

def add_workout_exercise_action(
    data: Any,
    *,
    db: Session,
    user_id: Optional[str],
    revalidator: Revalidator,
) -> dict:
    """Attach a catalog exercise to a workout at ``order`` (or at the end)."""
    if user_id is None:
        return failure(UNAUTHORIZED)

    payload, invalid = parse_input(WorkoutExerciseCreate, data)
    if invalid:
        return invalid

    try:
        we = WorkoutExerciseRepository(db).add(
            payload.workout_id, payload.exercise_id, user_id, order=payload.order
        )
    except ValueError:
        return conflict("order", "position already taken in this workout")
    except SQLAlchemyError:
        db.rollback()
        log.exception("Failed to add exercise to workout")
        return failure("Failed to add exercise to workout")

    if not we:
        return failure(WORKOUT_OR_EXERCISE_NOT_FOUND)

    revalidator.revalidate_path(workout_path(payload.workout_id))
    return {"success": True, "workout_exercise": WorkoutExerciseRead.model_validate(we)}

def log_set_action(
    data: Any,
    *,
    db: Session,
    user_id: Optional[str],
    revalidator: Revalidator,
) -> dict:
    if user_id is None:
        return failure(UNAUTHORIZED)

    payload, invalid = parse_input(SetCreate, data)
    if invalid:
        return invalid

    try:
        s = SetRepository(db).add(
            payload.workout_exercise_id,
            user_id,
            reps=payload.reps,
            weight=payload.weight,
            set_number=payload.set_number,
        )
    except ValueError:
        return conflict("set_number", "set number already logged for this exercise")
    except SQLAlchemyError:
        db.rollback()
        log.exception("Failed to log set")
        return failure("Failed to log set")

    if not s:
        return failure(EXERCISE_NOT_FOUND)

    revalidator.revalidate_path(workout_path(s.workout_exercise.workout_id))
    return {"success": True, "set": SetRead.model_validate(s)}
