"""
Error response models.

Standardized error responses for the API.
"""

from pydantic import BaseModel
from typing import Any, Optional


class ErrorResponse(BaseModel):
    """Standard error response format, matching RidehailError.to_dict()."""

    error: str
    message: str
    details: Optional[dict[str, Any]] = None
