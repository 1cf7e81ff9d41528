from __future__ import annotations
from decimal import Decimal
from typing import Optional
from uuid import UUID

from sqlalchemy import select, func
from sqlalchemy.exc import IntegrityError

from app.models import ExerciseSet
from app.repositories.base import BaseRepository
from app.repositories.workout_exercise_repo import WorkoutExerciseRepository

class SetRepository(BaseRepository[ExerciseSet]):
    def list_by_workout_exercise(self, workout_exercise_id: UUID, user_id: str) -> list[ExerciseSet]:
        parent = WorkoutExerciseRepository(self.db).get(workout_exercise_id, user_id)
        if not parent:
            return []
        stmt = select(ExerciseSet).where(ExerciseSet.workout_exercise_id == workout_exercise_id)\
                                  .order_by(ExerciseSet.set_number.asc())
        return list(self.db.execute(stmt).scalars().all())

    def add(
        self,
        workout_exercise_id: UUID,
        user_id: str,
        *,
        reps: int | None,
        weight: Decimal | None,
        set_number: int | None = None,
    ) -> Optional[ExerciseSet]:
        if not WorkoutExerciseRepository(self.db).get(workout_exercise_id, user_id):
            return None

        if set_number is None:
            # Auto-increment based on current max for this workout exercise
            max_num = self.db.execute(
                select(func.max(ExerciseSet.set_number))
                .where(ExerciseSet.workout_exercise_id == workout_exercise_id)
            ).scalar_one()
            set_number = (max_num or 0) + 1

        s = ExerciseSet(**self.stamp(
            workout_exercise_id=workout_exercise_id,
            set_number=set_number,
            reps=reps,
            weight=weight,
        ))
        try:
            return self.add_and_refresh(s)
        except IntegrityError:
            self.db.rollback()
            raise ValueError("set_number_taken")
