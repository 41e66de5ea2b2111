"""Pytest configuration and fixtures for testing."""
import os

# Set test environment before importing app modules
os.environ['DATABASE_URL'] = 'sqlite:///:memory:'
os.environ['LOG_DIR'] = ''

import pytest
from typing import Generator
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

# This import is crucial for populating Base.metadata before anything else.
from config.database import Base, get_db
from main import create_fastapi_app
from models.category import CategoryModel


# One in-memory database per test; StaticPool shares the single connection
TEST_DATABASE_URL = "sqlite://"


@pytest.fixture(scope="function")
def engine():
    """Create a new in-memory SQLite engine for each test function."""
    test_engine = create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},  # SQLite specific
        poolclass=StaticPool,
        echo=False,
    )
    Base.metadata.create_all(bind=test_engine)
    yield test_engine
    Base.metadata.drop_all(bind=test_engine)
    test_engine.dispose()


@pytest.fixture(scope="function")
def db_session_factory(engine) -> Generator[sessionmaker, None, None]:
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    yield SessionLocal


@pytest.fixture(scope="function")
def db_session(db_session_factory):
    session = db_session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def api_client(db_session_factory: sessionmaker) -> Generator[TestClient, None, None]:
    """Create a test client for API testing."""
    app = create_fastapi_app(configure_logging=False)

    def override_get_db():
        session = db_session_factory()
        try:
            yield session
        except Exception:
            session.rollback()  # Rollback on exception
            raise
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sample_category_data():
    """Sample category data."""
    return {
        "name": "Groceries"
    }


# Database seeding fixtures
@pytest.fixture(scope="function")
def seeded_db(db_session_factory: sessionmaker) -> dict:
    session = db_session_factory()
    try:
        groceries = CategoryModel(name="Groceries")
        transport = CategoryModel(name="Transport")
        session.add_all([groceries, transport])
        session.commit()
        session.refresh(groceries)
        session.refresh(transport)

        return {
            "groceries": groceries,
            "transport": transport,
            "db_session": session,  # Provide the session for direct use in tests if needed
        }
    finally:
        session.close()
