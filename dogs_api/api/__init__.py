"""
API router initialization and setup.

Each feature router is exported on its own so the test harness can mount
just the features a suite exercises; ``api_router`` bundles all of them.
"""
from fastapi import APIRouter
from .endpoints import dogs

dogs_router = APIRouter()

dogs_router.include_router(
    dogs.router,
    prefix="/dogs",
    tags=["dogs"]
)

api_router = APIRouter()
api_router.include_router(dogs_router)

__all__ = ["api_router", "dogs_router"]
