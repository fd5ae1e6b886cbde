"""
User models for authentication.

These models represent the claims of Supabase access tokens.
"""

from pydantic import BaseModel, ConfigDict
from typing import Optional


class TokenPayload(BaseModel):
    """JWT token payload structure."""
    model_config = ConfigDict(extra="ignore")  # Ignore extra fields from JWT

    sub: str  # User ID
    email: Optional[str] = None  # Empty for anonymous users
    is_anonymous: bool = False
    aud: str  # Audience
    exp: int  # Expiration timestamp
    iat: int  # Issued at timestamp
