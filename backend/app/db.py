from datetime import datetime, timezone

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase
from .settings import Settings, get_settings

# Define the base class that all models should inherit from
class Base(DeclarativeBase):
    pass

def utcnow() -> datetime:
    """Naive UTC timestamp, matching the DateTime columns."""
    return datetime.now(timezone.utc).replace(tzinfo=None)

def create_db_engine(settings: Settings | None = None) -> Engine:
    s = settings or get_settings()
    return create_engine(s.DATABASE_URL, pool_pre_ping=True, echo=s.DB_ECHO)

# Session factory
def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)

# Dependency for FastAPI routes; the factory is injected by create_app()
def get_db(request: Request):
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
