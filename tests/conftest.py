"""Shared fixtures: an in-memory SQLite store and a TestClient around it."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, text
from sqlalchemy.pool import StaticPool

from object_api.main import create_app
from object_api.repository import ObjectRepository

OBJECTS_DDL = """
    CREATE TABLE objects (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        name TEXT NOT NULL,
        description TEXT NOT NULL,
        created_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP
    )
"""


def _memory_engine():
    # one shared connection so every request thread sees the same database
    return create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )


@pytest.fixture
def engine():
    eng = _memory_engine()
    with eng.begin() as conn:
        conn.execute(text(OBJECTS_DDL))
    yield eng
    eng.dispose()


@pytest.fixture
def broken_engine():
    """An engine whose database has no `objects` table: every statement fails."""
    eng = _memory_engine()
    yield eng
    eng.dispose()


@pytest.fixture
def repo(engine) -> ObjectRepository:
    return ObjectRepository(engine)


@pytest.fixture
def client(engine):
    with TestClient(create_app(engine)) as c:
        yield c


@pytest.fixture
def broken_client(broken_engine):
    with TestClient(create_app(broken_engine)) as c:
        yield c
