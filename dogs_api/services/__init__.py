from .dogs import DogsService

__all__ = ["DogsService"]
