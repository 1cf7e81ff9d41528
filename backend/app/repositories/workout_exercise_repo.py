from __future__ import annotations
from typing import Optional
from uuid import UUID

from sqlalchemy import select, func
from sqlalchemy.exc import IntegrityError

from app.models import Workout, WorkoutExercise
from app.repositories.base import BaseRepository
from app.repositories.exercise_repo import ExerciseRepository
from app.repositories.workout_repo import WorkoutRepository

class WorkoutExerciseRepository(BaseRepository[WorkoutExercise]):
    def get(self, workout_exercise_id: UUID, user_id: str) -> Optional[WorkoutExercise]:
        # Ownership lives on the parent workout
        stmt = (
            select(WorkoutExercise)
            .join(Workout, WorkoutExercise.workout_id == Workout.id)
            .where(WorkoutExercise.id == workout_exercise_id, Workout.user_id == user_id)
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def add(
        self,
        workout_id: UUID,
        exercise_id: UUID,
        user_id: str,
        *,
        order: int | None = None,
    ) -> Optional[WorkoutExercise]:
        # Both the workout and the catalog entry must belong to the caller
        if not WorkoutRepository(self.db).get_owned(workout_id, user_id):
            return None
        if not ExerciseRepository(self.db).get(exercise_id, user_id):
            return None

        if order is None:
            # Append after the current last position
            max_order = self.db.execute(
                select(func.max(WorkoutExercise.order)).where(WorkoutExercise.workout_id == workout_id)
            ).scalar_one()
            order = 0 if max_order is None else max_order + 1

        we = WorkoutExercise(**self.stamp(workout_id=workout_id, exercise_id=exercise_id, order=order))
        try:
            return self.add_and_refresh(we)
        except IntegrityError:
            self.db.rollback()
            raise ValueError("order_taken")
