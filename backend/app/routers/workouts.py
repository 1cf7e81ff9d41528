from datetime import date
from typing import Any, Optional
from uuid import UUID

from fastapi import APIRouter, Body, Depends, HTTPException, Query, Request, status
from sqlalchemy.orm import Session

from app.actions.exercises import add_workout_exercise_action
from app.actions.workouts import create_workout_action, update_workout_action
from app.cache import DASHBOARD_PATH, workout_path
from app.db import get_db
from app.deps.auth import get_current_user_id, require_user_id
from app.repositories.workout_repo import WorkoutRepository
from app.routers.responses import action_response
from app.schemas.workout import WorkoutDetail

router = APIRouter(prefix="/workouts", tags=["workouts"])

@router.get("", response_model=list[WorkoutDetail])
def list_my_workouts(
    request: Request,
    db: Session = Depends(get_db),
    user_id: str = Depends(require_user_id),
    on: Optional[date] = Query(None, alias="date", description="Only workouts started on this day"),
):
    repo = WorkoutRepository(db)
    workouts = repo.list_by_user_on_date(user_id, on) if on is not None else repo.list_by_user(user_id)
    # Freshly read from the store, so the dashboard is no longer stale
    request.app.state.revalidator.clear(DASHBOARD_PATH)
    return workouts

@router.get("/{workout_id}", response_model=WorkoutDetail)
def get_workout(
    workout_id: UUID,
    request: Request,
    db: Session = Depends(get_db),
    user_id: str = Depends(require_user_id),
):
    workout = WorkoutRepository(db).get(workout_id, user_id)
    if not workout:
        # Same answer whether it is missing or someone else's
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Workout not found")
    request.app.state.revalidator.clear(workout_path(workout.id))
    return workout

@router.post("")
def create_workout(
    request: Request,
    payload: Any = Body(None),
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(get_current_user_id),
):
    result = create_workout_action(
        payload, db=db, user_id=user_id, revalidator=request.app.state.revalidator
    )
    return action_response(result, success_status=status.HTTP_201_CREATED)

@router.patch("/{workout_id}")
def update_workout(
    workout_id: str,
    request: Request,
    payload: Any = Body(None),
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(get_current_user_id),
):
    # Path id wins over anything in the body
    data = {**payload, "workout_id": workout_id} if isinstance(payload, dict) else payload
    result = update_workout_action(
        data, db=db, user_id=user_id, revalidator=request.app.state.revalidator
    )
    return action_response(result)

@router.post("/{workout_id}/exercises")
def add_exercise_to_workout(
    workout_id: str,
    request: Request,
    payload: Any = Body(None),
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(get_current_user_id),
):
    data = {**payload, "workout_id": workout_id} if isinstance(payload, dict) else payload
    result = add_workout_exercise_action(
        data, db=db, user_id=user_id, revalidator=request.app.state.revalidator
    )
    return action_response(result, success_status=status.HTTP_201_CREATED)
