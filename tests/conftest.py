"""
Shared pytest fixtures and configuration for pomo tests.
"""
import os
from unittest.mock import patch

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from models import Base
from database import get_db
from session_service import SessionService


@pytest.fixture(autouse=True)
def mock_env_vars():
    """Point the client at a dummy server for every test."""
    with patch.dict(os.environ, {"BASE_URL": "http://pomo.test"}):
        yield


@pytest.fixture
def test_db():
    """Create an in-memory SQLite database for each test."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(test_db):
    """Create a new database session for each test."""
    SessionLocal = sessionmaker(bind=test_db)
    session = SessionLocal()
    yield session
    session.rollback()
    session.close()


@pytest.fixture
def service(db_session):
    """Provide a SessionService bound to the test database."""
    return SessionService(db_session)


@pytest.fixture
def app_with_db(db_session):
    """Provide FastAPI app with test database."""
    from api import app

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app_with_db):
    """Create a TestClient for FastAPI app."""
    from fastapi.testclient import TestClient

    return TestClient(app_with_db)


@pytest.fixture
def anyio_backend():
    return "asyncio"
