from .base import ErrorResponse
from .dogs import DogCreate, DogCreated, DogRead

__all__ = [
    # Base
    "ErrorResponse",

    # Dogs
    "DogCreate",
    "DogCreated",
    "DogRead",
]
