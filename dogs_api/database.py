from sqlalchemy import Engine, create_engine, text
from sqlalchemy.orm import Session, sessionmaker, DeclarativeBase

from dogs_api.config import Settings


class Base(DeclarativeBase):
    pass


def create_db_engine(settings: Settings) -> Engine:
    """Build the engine (and its connection pool) for the configured store."""
    connect_args = {}
    if settings.is_sqlite:
        # Requests are served from a worker thread pool
        connect_args["check_same_thread"] = False
    return create_engine(
        settings.database_url,
        echo=settings.db_echo,
        pool_pre_ping=True,
        connect_args=connect_args,
    )


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def check_connection(engine: Engine) -> None:
    """Round-trip ``SELECT 1``; raises the driver error if the store is unreachable."""
    with engine.connect() as connection:
        connection.execute(text("SELECT 1"))
