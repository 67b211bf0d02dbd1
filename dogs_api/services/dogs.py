"""Dog creation.

Takes an already validated ``DogCreate`` and stores it as a ``Dog`` row.
The store assigns the id; the returned record carries it.
"""
from __future__ import annotations

from typing import Optional

from dogs_api.models.db import Dog
from dogs_api.models.schemas.dogs import DogCreate
from dogs_api.repositories import DogRepository
from dogs_api.utils import get_logger, log_business_event

logger = get_logger(__name__)


class DogsService:
    def __init__(self, repository: DogRepository):
        self.repository = repository

    def create(self, request: DogCreate, request_id: Optional[str] = None) -> Dog:
        """Insert one dog.

        Raises:
            PersistenceError: the store is unreachable or rejected the write.
        """
        dog = Dog(name=request.name, age=request.age, breed=request.breed)
        created = self.repository.insert(dog)

        log_business_event(
            event_type="dog_created",
            details={
                "dog_id": created.id,
                "breed": created.breed,
            },
            request_id=request_id,
        )
        return created


__all__ = ["DogsService"]
