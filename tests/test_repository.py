import pytest
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from dogs_api.exceptions import PersistenceError
from dogs_api.models.db import Dog
from dogs_api.repositories import DogRepository, Repository


def test_insert_populates_generated_id(db_session: Session):
    dog = Dog(name="Dingo", age=3, breed="Beagle")
    assert dog.id is None
    stored = DogRepository(db_session).insert(dog)
    assert stored is dog
    assert isinstance(stored.id, int)


def test_insert_missing_required_column_raises(db_session: Session):
    repo = DogRepository(db_session)
    with pytest.raises(PersistenceError):
        repo.insert(Dog(name="Dingo", age=3, breed=None))  # type: ignore[arg-type]
    # Session is usable again after the rollback
    assert repo.insert(Dog(name="Dingo", age=3, breed="Beagle")).id is not None


def test_delete_all_empties_table(db_session: Session):
    repo = DogRepository(db_session)
    for name in ("A", "B", "C"):
        repo.insert(Dog(name=name, age=1, breed="Pug"))

    repo.delete_all(Dog.__tablename__)

    assert db_session.scalar(select(func.count()).select_from(Dog)) == 0


def test_delete_all_unknown_table_raises(db_session: Session):
    with pytest.raises(PersistenceError) as exc_info:
        Repository(db_session).delete_all("cats")
    assert exc_info.value.table == "cats"
