"""Common schemas used across the application."""

from typing import Optional

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Error body returned for catalog errors."""

    detail: str
    error: str
    completed: Optional[str] = None
