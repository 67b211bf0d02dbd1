import pytest
from sqlalchemy import func, select

from dogs_api.api import dogs_router
from dogs_api.config import Settings
from dogs_api.exceptions import SetupError
from dogs_api.models.db import Dog
from dogs_api.testing import TestApp, clear_all_tables, create_test_app


def test_clear_all_tables_removes_every_row(test_app: TestApp, dingo):
    for _ in range(3):
        assert test_app.client.post("/dogs", json=dingo).status_code == 201

    clear_all_tables(test_app.engine)

    with test_app.session() as db:
        assert db.scalar(select(func.count()).select_from(Dog)) == 0


def test_clear_all_tables_keeps_id_sequence(test_app: TestApp, dingo):
    before = test_app.client.post("/dogs", json=dingo).json()["id"]
    clear_all_tables(test_app.engine)
    after = test_app.client.post("/dogs", json=dingo).json()["id"]
    assert after > before


def test_clear_all_tables_on_empty_store(test_app: TestApp):
    clear_all_tables(test_app.engine)
    clear_all_tables(test_app.engine)


def test_create_test_app_unreachable_database_aborts(tmp_path):
    settings = Settings(
        DATABASE_URL=f"sqlite+pysqlite:///{tmp_path / 'missing' / 'dogs.db'}",
        log_file="",
    )
    with pytest.raises(SetupError):
        create_test_app([dogs_router], settings=settings)


def test_create_test_app_mounts_only_given_routers(tmp_path):
    settings = Settings(
        DATABASE_URL=f"sqlite+pysqlite:///{tmp_path / 'isolated.db'}",
        log_file="",
    )
    harness = create_test_app([], settings=settings)
    try:
        assert harness.client.get("/health").status_code == 200
        assert harness.client.post("/dogs", json={"name": "A", "age": 1, "breed": "B"}).status_code == 404
    finally:
        harness.close()
