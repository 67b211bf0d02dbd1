"""
Base schemas used across the application.
"""
from typing import Any, Optional
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Envelope returned by the exception handlers for every non-2xx response."""
    success: bool = False
    message: Any
    request_id: str
    details: Optional[Any] = None
