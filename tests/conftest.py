"""Pytest fixtures."""

import pathlib

import pytest
from fastapi.testclient import TestClient

from school_api.core.config import Settings
from school_api.db.store import Store
from school_api.main import create_app
from school_api.repositories import ContactRepository, StudentRepository


@pytest.fixture
def db_path(tmp_path: pathlib.Path) -> pathlib.Path:
    """Path of a SQLite file unique to each test."""
    return tmp_path / "school-test.db"


@pytest.fixture
def settings(db_path: pathlib.Path) -> Settings:
    """Settings pointing at the per-test database, ignoring any .env file."""
    return Settings(_env_file=None, database_url=f"sqlite:///{db_path}")


@pytest.fixture
def empty_store(settings: Settings):
    """Store with tables created but no sample rows."""
    store = Store.from_settings(settings)
    store.initialize(seed=False)
    yield store
    store.close()


@pytest.fixture
def store(settings: Settings):
    """Store with tables and the five seeded students and contacts."""
    store = Store.from_settings(settings)
    store.initialize()
    yield store
    store.close()


@pytest.fixture
def students(store: Store) -> StudentRepository:
    return StudentRepository(store)


@pytest.fixture
def contacts(store: Store) -> ContactRepository:
    return ContactRepository(store)


@pytest.fixture
def client(settings: Settings, store: Store):
    """HTTP client for an app serving the seeded store."""
    app = create_app(settings=settings, store=store)
    with TestClient(app) as test_client:
        yield test_client


NEW_STUDENT = {
    "studentid": 6,
    "firstname": "New",
    "lastname": "Student",
    "dateofbirth": "2004-06-06",
    "grade": 3,
    "gender": "Male",
}


@pytest.fixture
def new_student() -> dict:
    """Valid payload for a student that is not in the seed data."""
    return dict(NEW_STUDENT)
