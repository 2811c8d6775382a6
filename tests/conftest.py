"""
Pytest configuration and shared fixtures.
This file ensures the project root is in sys.path for imports and wires every
test to its own in-memory database.
"""

import sys
from pathlib import Path
from typing import Generator

# Add project root to sys.path so we can import domain, services, etc.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from app.config import Settings
from domain.models import Database
from main import create_app


@pytest.fixture(scope="function")
def database() -> Generator[Database, None, None]:
    """
    Fresh in-memory SQLite database with the schema created.

    Each test gets its own store, so nothing leaks between tests.
    """
    db = Database("sqlite://")
    db.init_database()
    try:
        yield db
    finally:
        db.drop_all()
        db.dispose()


@pytest.fixture(scope="function")
def db_session(database: Database) -> Generator[Session, None, None]:
    """SQLAlchemy session bound to the test database."""
    session = database.session_factory()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture(scope="function")
def test_settings() -> Settings:
    return Settings(environment="testing", db_init_attempts=1, db_init_delay_sec=0)


@pytest.fixture(scope="function")
def app(test_settings: Settings, database: Database) -> FastAPI:
    return create_app(settings=test_settings, database=database)


@pytest.fixture(scope="function")
def client(app: FastAPI) -> TestClient:
    """HTTP client for the app; keeps cookies between requests like a browser."""
    return TestClient(app)
