# app/repositories/base.py
from __future__ import annotations
from datetime import datetime
from typing import Callable, Generic, TypeVar

from sqlalchemy.orm import Session

from app.db import utcnow

T = TypeVar("T")  # SQLAlchemy model type

Clock = Callable[[], datetime]

class BaseRepository(Generic[T]):
    """Lightweight base for owner-scoped repositories using SQLAlchemy 2.0 style.

    Every public method takes the caller's user id. A row that exists but is
    owned by somebody else is reported exactly like a missing row (``None``).
    """
    def __init__(self, db: Session, *, clock: Clock = utcnow):
        self.db = db
        self.clock = clock

    def add_and_refresh(self, entity: T) -> T:
        self.db.add(entity)
        self.db.commit()
        self.db.refresh(entity)
        return entity

    def stamp(self, **values) -> dict:
        """Fill created_at/updated_at from the repository clock."""
        now = self.clock()
        return {"created_at": now, "updated_at": now, **values}
