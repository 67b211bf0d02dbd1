"""Session-backed repository with the two store operations the service needs."""
from __future__ import annotations

from typing import Generic, TypeVar

from sqlalchemy import delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from dogs_api.database import Base
from dogs_api.exceptions import PersistenceError
from dogs_api.utils import get_logger

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class Repository(Generic[ModelT]):
    """Insert records and clear tables through one SQLAlchemy session.

    Store failures (including values the driver cannot bind, such as an
    integer wider than the column) roll the session back and are re-raised as
    ``PersistenceError`` chained to the driver error.
    """

    def __init__(self, session: Session):
        self.session = session

    def insert(self, record: ModelT) -> ModelT:
        """Persist ``record`` and return it with its store-generated id populated."""
        table = record.__tablename__
        try:
            self.session.add(record)
            self.session.commit()
            self.session.refresh(record)
        except (SQLAlchemyError, OverflowError) as e:
            self.session.rollback()
            logger.error("Insert failed", table=table, error=str(e))
            raise PersistenceError(f"Failed to insert into '{table}'", operation="insert", table=table) from e
        return record

    def delete_all(self, table_name: str) -> None:
        """Delete every row in ``table_name``. Identifier sequences are left as they are."""
        table = Base.metadata.tables.get(table_name)
        if table is None:
            raise PersistenceError(f"Unknown table '{table_name}'", operation="delete_all", table=table_name)
        try:
            result = self.session.execute(delete(table))
            self.session.commit()
        except (SQLAlchemyError, OverflowError) as e:
            self.session.rollback()
            logger.error("Delete failed", table=table_name, error=str(e))
            raise PersistenceError(f"Failed to clear '{table_name}'", operation="delete_all", table=table_name) from e
        logger.debug("Table cleared", table=table_name, rows=result.rowcount)
