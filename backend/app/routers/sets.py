from typing import Any, Optional
from uuid import UUID

from fastapi import APIRouter, Body, Depends, Request, status
from sqlalchemy.orm import Session

from app.actions.exercises import log_set_action
from app.db import get_db
from app.deps.auth import get_current_user_id, require_user_id
from app.repositories.set_repo import SetRepository
from app.routers.responses import action_response
from app.schemas.exercise_set import SetRead

router = APIRouter(prefix="/workout-exercises", tags=["sets"])

@router.get("/{workout_exercise_id}/sets", response_model=list[SetRead])
def list_sets(
    workout_exercise_id: UUID,
    db: Session = Depends(get_db),
    user_id: str = Depends(require_user_id),
):
    return SetRepository(db).list_by_workout_exercise(workout_exercise_id, user_id)

@router.post("/{workout_exercise_id}/sets")
def log_set(
    workout_exercise_id: str,
    request: Request,
    payload: Any = Body(None),
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(get_current_user_id),
):
    data = {**payload, "workout_exercise_id": workout_exercise_id} if isinstance(payload, dict) else payload
    result = log_set_action(data, db=db, user_id=user_id, revalidator=request.app.state.revalidator)
    return action_response(result, success_status=status.HTTP_201_CREATED)
