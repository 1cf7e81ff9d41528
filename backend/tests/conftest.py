"""
Point the app at in-memory SQLite before anything imports app.main, and give
each test its own freshly created schema.
"""
import os
from datetime import datetime, timedelta

os.environ.setdefault("DB_URL", "sqlite+pysqlite:///:memory:")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from app import models  # noqa: F401  # registers tables on Base.metadata
from app.cache import Revalidator
from app.db import Base, make_session_factory
from app.main import create_app
from app.security import create_access_token


class TickingClock:
    """Deterministic clock: every call is one second after the previous one."""
    def __init__(self, start=datetime(2024, 1, 1, 12, 0, 0)):
        self.now = start

    def __call__(self):
        self.now += timedelta(seconds=1)
        return self.now


@pytest.fixture
def engine():
    eng = create_engine(
        "sqlite+pysqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(eng)
    yield eng
    eng.dispose()

@pytest.fixture
def session_factory(engine):
    return make_session_factory(engine)

@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()

@pytest.fixture
def clock():
    return TickingClock()

@pytest.fixture
def revalidator():
    return Revalidator()

@pytest.fixture
def app(session_factory):
    return create_app(session_factory)

@pytest.fixture
def client(app):
    return TestClient(app)

@pytest.fixture
def auth_headers():
    def make(user_id: str) -> dict:
        return {"Authorization": f"Bearer {create_access_token(user_id)}"}
    return make
