from .base import Repository
from .dogs import DogRepository

__all__ = ["Repository", "DogRepository"]
