"""
Identity module data models.

A Session is the provider-issued proof of identity. The backend only reads
it; creating and ending sessions is done through the identity provider.
"""

from enum import Enum
from typing import Awaitable, Callable, Optional
from pydantic import BaseModel, Field


class ProviderErrorCode(str, Enum):
    """Normalized identity provider error codes."""

    INVALID_EMAIL = "invalid-email"
    USER_DISABLED = "user-disabled"
    USER_NOT_FOUND = "user-not-found"
    WRONG_PASSWORD = "wrong-password"
    TOO_MANY_REQUESTS = "too-many-requests"
    NETWORK_REQUEST_FAILED = "network-request-failed"
    EMAIL_ALREADY_IN_USE = "email-already-in-use"
    WEAK_PASSWORD = "weak-password"


class Session(BaseModel):
    """Active session as seen by this backend."""

    user_id: str = Field(..., description="Provider user ID")
    email: Optional[str] = Field(None, description="Email, absent for anonymous users")
    is_anonymous: bool = Field(default=False, description="Anonymous sign-in")
    access_token: Optional[str] = Field(None, description="Provider access token")

    model_config = {"frozen": True}


# Called with the new session, or None after sign-out/expiry
SessionListener = Callable[[Optional[Session]], Awaitable[None]]
Unsubscribe = Callable[[], None]
