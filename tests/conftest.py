"""
Shared fixtures: an in-memory database and a fake user service.
"""

import os

# Must be set before app modules read settings
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.main import app
from app.database import Base, get_db
from app.api.dependencies import get_owner_validator

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


class FakeOwnerValidator:
    """In-memory stand-in for the user service."""

    def __init__(self, known_owners=()):
        self.known_owners = set(known_owners)
        self.calls = []

    def exists(self, owner_id):
        self.calls.append(owner_id)
        return owner_id in self.known_owners


@pytest.fixture(autouse=True)
def setup_database():
    """Create fresh database for each test."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def owner_validator():
    """Users 1 and 2 exist; every other id is unknown."""
    return FakeOwnerValidator(known_owners={1, 2})


@pytest.fixture
def client(owner_validator):
    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_owner_validator] = lambda: owner_validator
    yield TestClient(app)
    app.dependency_overrides.clear()
