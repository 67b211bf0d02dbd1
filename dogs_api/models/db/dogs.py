"""SQLAlchemy model for stored dogs."""
from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from dogs_api.database import Base


class Dog(Base):
    __tablename__ = "dogs"
    # Ids are never reused after rows are deleted, as with a Postgres sequence
    __table_args__ = {"sqlite_autoincrement": True}

    # Assigned by the store on insert, never by callers
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    age: Mapped[int] = mapped_column(Integer, nullable=False)
    breed: Mapped[str] = mapped_column(String, nullable=False)

    def __repr__(self) -> str:
        return f"Dog(id={self.id!r}, name={self.name!r}, age={self.age!r}, breed={self.breed!r})"
