from __future__ import annotations
from datetime import date, datetime, time
from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from app.models import Workout, WorkoutExercise
from app.repositories.base import BaseRepository
from app.schemas.workout import WorkoutPatch

UPDATABLE_FIELDS = {"name", "started_at", "completed_at"}

# Last representable instant of a calendar day, at millisecond precision
END_OF_DAY = time(23, 59, 59, 999000)

def day_bounds(day: date) -> tuple[datetime, datetime]:
    return datetime.combine(day, time.min), datetime.combine(day, END_OF_DAY)

class WorkoutRepository(BaseRepository[Workout]):
    def _nested(self):
        # workout -> exercises (by order) -> exercise + sets (by set_number);
        # collection ordering comes from the relationship order_by clauses.
        # selectinload batches each level into one IN query, never N+1.
        return (
            select(Workout)
            .options(
                selectinload(Workout.workout_exercises).selectinload(WorkoutExercise.exercise),
                selectinload(Workout.workout_exercises).selectinload(WorkoutExercise.sets),
            )
            .execution_options(populate_existing=True)
        )

    # READS
    def list_by_user(self, user_id: str) -> list[Workout]:
        stmt = self._nested().where(Workout.user_id == user_id)\
                             .order_by(Workout.started_at.desc())
        return list(self.db.execute(stmt).scalars().all())

    def list_by_user_on_date(self, user_id: str, day: date) -> list[Workout]:
        start, end = day_bounds(day)
        stmt = self._nested().where(
            Workout.user_id == user_id,
            Workout.started_at >= start,
            Workout.started_at <= end,
        ).order_by(Workout.started_at.desc())
        return list(self.db.execute(stmt).scalars().all())

    def get(self, workout_id: UUID, user_id: str) -> Optional[Workout]:
        stmt = self._nested().where(Workout.id == workout_id, Workout.user_id == user_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def get_owned(self, workout_id: UUID, user_id: str) -> Optional[Workout]:
        """Flat lookup (no children) for ownership checks."""
        stmt = select(Workout).where(Workout.id == workout_id, Workout.user_id == user_id)
        return self.db.execute(stmt).scalar_one_or_none()

    # WRITES
    def create(self, user_id: str, *, name: str | None, started_at: datetime) -> Workout:
        workout = Workout(**self.stamp(
            user_id=user_id,
            name=name,
            started_at=started_at,
            completed_at=None,
        ))
        return self.add_and_refresh(workout)

    def update(self, workout_id: UUID, patch: WorkoutPatch, user_id: str) -> Optional[Workout]:
        workout = self.get_owned(workout_id, user_id)
        if not workout:
            return None
        for field, value in patch.model_dump(exclude_unset=True, include=UPDATABLE_FIELDS).items():
            setattr(workout, field, value)
        workout.updated_at = self.clock()
        self.db.commit()
        self.db.refresh(workout)
        return workout
