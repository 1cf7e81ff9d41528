from datetime import datetime
from typing import Annotated
from uuid import UUID
from pydantic import BaseModel, Field

from app.schemas.common import NameStr
from app.schemas.exercise_set import SetRead

Position = Annotated[int, Field(ge=0)]

class ExerciseCreate(BaseModel):
    name: NameStr

class ExerciseRead(BaseModel):
    id: UUID
    name: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}

class WorkoutExerciseCreate(BaseModel):
    workout_id: UUID
    exercise_id: UUID
    # Omitted -> appended after the current last exercise
    order: Position | None = None

class WorkoutExerciseRead(BaseModel):
    id: UUID
    workout_id: UUID
    exercise_id: UUID
    order: int
    exercise: ExerciseRead
    sets: list[SetRead] = []

    model_config = {"from_attributes": True}
