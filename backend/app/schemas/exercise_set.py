from datetime import datetime
from decimal import Decimal
from typing import Annotated
from uuid import UUID
from pydantic import BaseModel, Field

SetNumber = Annotated[int, Field(ge=1)]
NonNegInt = Annotated[int, Field(ge=0)]
Weight = Annotated[Decimal, Field(ge=0, max_digits=10, decimal_places=2)]

class SetCreate(BaseModel):
    workout_exercise_id: UUID
    set_number: SetNumber | None = None
    reps: NonNegInt | None = None
    weight: Weight | None = None

class SetRead(BaseModel):
    id: UUID
    workout_exercise_id: UUID
    set_number: int
    reps: int | None = None
    weight: Decimal | None = None

    model_config = {"from_attributes": True}
