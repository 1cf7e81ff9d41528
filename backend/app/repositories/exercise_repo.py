from __future__ import annotations
from typing import Optional
from uuid import UUID

from sqlalchemy import select

from app.models import Exercise
from app.repositories.base import BaseRepository

class ExerciseRepository(BaseRepository[Exercise]):
    def list_by_user(self, user_id: str) -> list[Exercise]:
        stmt = select(Exercise).where(Exercise.user_id == user_id).order_by(Exercise.name.asc())
        return list(self.db.execute(stmt).scalars().all())

    def get(self, exercise_id: UUID, user_id: str) -> Optional[Exercise]:
        stmt = select(Exercise).where(Exercise.id == exercise_id, Exercise.user_id == user_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def create(self, user_id: str, *, name: str) -> Exercise:
        return self.add_and_refresh(Exercise(**self.stamp(user_id=user_id, name=name)))
