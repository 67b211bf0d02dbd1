from .dogs import Dog

__all__ = [
    "Dog",
]
