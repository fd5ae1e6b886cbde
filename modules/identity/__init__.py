"""
Identity module.

Talks to the identity provider (Supabase Auth): credential sign-in,
account creation, token bootstrap, sign-out and session-change events.

Public API:
- IIdentityProvider: Interface for identity operations
- Session: Read-only view of the provider session
- ProviderErrorCode: Normalized provider error codes
- IdentityProviderError: Raised when the provider rejects an operation
"""

from .interfaces import IIdentityProvider
from .models import ProviderErrorCode, Session, SessionListener, Unsubscribe
from .exceptions import IdentityProviderError

__all__ = [
    # Interface
    "IIdentityProvider",
    # Models
    "Session",
    "SessionListener",
    "Unsubscribe",
    "ProviderErrorCode",
    # Exceptions
    "IdentityProviderError",
]
