"""
Dependencies for database sessions and service wiring.

The application factory stores the session factory on ``app.state``; each
request gets its own session from it, a ``DogRepository`` over that session,
and a ``DogsService`` over that repository.
"""
from typing import Generator
from fastapi import Depends, Request
from sqlalchemy.orm import Session
from dogs_api.exceptions import DogsApiError
from dogs_api.repositories import DogRepository
from dogs_api.services import DogsService
from dogs_api.utils import get_logger

logger = get_logger(__name__)


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    Database session dependency.
    Rolls back on error and always closes the session. Service errors are
    logged by their own exception handler, so only unexpected ones are logged here.

    Yields:
        Session: SQLAlchemy database session
    """
    db = request.app.state.session_factory()
    try:
        yield db
    except Exception as e:
        if not isinstance(e, DogsApiError):
            logger.error("Database session error", error=str(e), exc_info=True)
        db.rollback()
        raise
    finally:
        db.close()


def get_dog_repository(db: Session = Depends(get_db)) -> DogRepository:
    return DogRepository(db)


def get_dogs_service(repository: DogRepository = Depends(get_dog_repository)) -> DogsService:
    return DogsService(repository)
