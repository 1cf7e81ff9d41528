from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.orm import Session

from app.actions.exercises import create_exercise_action
from app.db import get_db
from app.deps.auth import get_current_user_id, require_user_id
from app.repositories.exercise_repo import ExerciseRepository
from app.routers.responses import action_response
from app.schemas.exercise import ExerciseRead

router = APIRouter(prefix="/exercises", tags=["exercises"])

@router.get("", response_model=list[ExerciseRead])
def list_my_exercises(db: Session = Depends(get_db), user_id: str = Depends(require_user_id)):
    return ExerciseRepository(db).list_by_user(user_id)

@router.post("")
def create_exercise(
    payload: Any = Body(None),
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(get_current_user_id),
):
    result = create_exercise_action(payload, db=db, user_id=user_id)
    return action_response(result, success_status=status.HTTP_201_CREATED)
