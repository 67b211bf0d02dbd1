"""Pytest fixtures.

One test application is booted per session against the database named in
``.int.env``; every table is cleared after each test.
"""
import os
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session

from dogs_api.api import dogs_router
from dogs_api.config import TEST_ENV_FILE, load_settings
from dogs_api.database import Base
from dogs_api.testing import TestApp, clear_all_tables, create_test_app

ROOT_DIR = Path(__file__).resolve().parents[1]


@pytest.fixture(scope="session")
def test_app():
    settings = load_settings(str(ROOT_DIR / TEST_ENV_FILE))
    harness = create_test_app([dogs_router], settings=settings)
    clear_all_tables(harness.engine)  # leftovers from an aborted run
    yield harness
    Base.metadata.drop_all(bind=harness.engine)
    harness.close()
    url = make_url(settings.database_url)
    if url.get_backend_name() == "sqlite" and url.database:
        try:
            os.remove(url.database)
        except OSError:
            pass


@pytest.fixture(autouse=True)
def _clear_tables(test_app: TestApp):
    yield
    clear_all_tables(test_app.engine)


@pytest.fixture()
def client(test_app: TestApp) -> TestClient:
    return test_app.client


@pytest.fixture()
def db_session(test_app: TestApp):
    with test_app.session() as session:
        yield session


@pytest.fixture()
def unreachable_session(tmp_path):
    """Session bound to a SQLite file inside a directory that does not exist."""
    engine = create_engine(f"sqlite+pysqlite:///{tmp_path / 'missing' / 'dogs.db'}")
    session = Session(engine)
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture()
def dingo() -> dict:
    return {"name": "Dingo", "age": 3, "breed": "Beagle"}
