"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- Database setup/teardown with seeded companies and jobs
- FastAPI test client
- Regular-user and admin bearer tokens
"""

import os

# Point the app at SQLite before anything builds the production engine
os.environ.setdefault("SQLALCHEMY_DATABASE_URI", "sqlite:///:memory:")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import Base, create_db_engine, execute, get_db
from app.core.security import create_token
import app.models  # noqa: F401  register tables on Base.metadata
from main import app


# Use in-memory SQLite for testing (fast, isolated)
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_db_engine(SQLALCHEMY_TEST_DATABASE_URL, poolclass=StaticPool)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def seed(db):
    """Insert companies c1-c3 and jobs Job1-Job3."""
    for n in (1, 2, 3):
        execute(
            db,
            """INSERT INTO companies (handle, name, num_employees, description, logo_url)
               VALUES ($1, $2, $3, $4, $5)""",
            [f"c{n}", f"C{n}", n, f"Desc{n}", f"http://c{n}.img"],
        )

    jobs = [
        ("Job1", 100000, 0, "c1"),
        ("Job2", 200000, 0.1, "c2"),
        ("Job3", None, None, "c3"),
    ]
    for title, salary, equity, handle in jobs:
        execute(
            db,
            "INSERT INTO jobs (title, salary, equity, company_handle) VALUES ($1, $2, $3, $4)",
            [title, salary, equity, handle],
        )
    db.commit()


@pytest.fixture
def db_session():
    """
    Create a fresh, seeded database session for each test.
    Tables are dropped after the test completes.
    """
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    seed(db)
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    """
    FastAPI test client with overridden database dependency.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def job_ids(db_session):
    """Seeded job ids keyed by title."""
    rows = execute(db_session, "SELECT id, title FROM jobs")
    return {row["title"]: row["id"] for row in rows}


@pytest.fixture
def u1_headers():
    """Bearer header for a regular user"""
    return {"Authorization": f"Bearer {create_token('u1', is_admin=False)}"}


@pytest.fixture
def admin_headers():
    """Bearer header for an admin user"""
    return {"Authorization": f"Bearer {create_token('admin', is_admin=True)}"}
