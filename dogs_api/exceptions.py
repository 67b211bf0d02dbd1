"""
Service error taxonomy.

Request payload validation failures are FastAPI's ``RequestValidationError``
and surface as 400; the classes below cover the store and startup.
"""
from typing import Optional


class DogsApiError(Exception):
    """Base class for errors raised by the dogs service."""


class PersistenceError(DogsApiError):
    """
    The store is unreachable or rejected a write.

    Surfaced to HTTP callers as 500. Never retried automatically.
    """

    def __init__(self, message: str, operation: Optional[str] = None, table: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.operation = operation
        self.table = table


class SetupError(DogsApiError):
    """Configuration or connection failure while initializing the app or test harness."""


__all__ = ["DogsApiError", "PersistenceError", "SetupError"]
