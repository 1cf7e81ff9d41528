from datetime import datetime
from uuid import UUID
from pydantic import BaseModel, field_validator

from app.schemas.common import NameStr, Timestamp
from app.schemas.exercise import WorkoutExerciseRead

class WorkoutCreate(BaseModel):
    name: NameStr | None = None
    started_at: Timestamp

class WorkoutPatch(BaseModel):
    """Partial update. Only fields present in the input are applied
    (see `model_fields_set`), so `completed_at: null` clears the value
    while omitting it leaves the stored value alone."""
    name: NameStr | None = None
    started_at: Timestamp | None = None
    completed_at: Timestamp | None = None

    @field_validator("started_at")
    @classmethod
    def started_at_not_null(cls, v: datetime | None) -> datetime:
        if v is None:
            raise ValueError("started_at cannot be null")
        return v

class WorkoutUpdate(WorkoutPatch):
    workout_id: UUID

class WorkoutRead(BaseModel):
    id: UUID
    user_id: str
    name: str | None = None
    started_at: datetime
    completed_at: datetime | None = None
    is_completed: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}

class WorkoutDetail(WorkoutRead):
    workout_exercises: list[WorkoutExerciseRead] = []
