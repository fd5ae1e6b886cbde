"""
Profiles module.

Stores the per-user profile document (role, verification, onboarding)
keyed by application namespace and user ID.

Public API:
- IProfileStore: Interface for profile persistence
- ProfileRecord, Role: Stored document and role enum
- ProfileStoreError: Raised on storage failures
"""

from .interfaces import IProfileStore
from .models import ProfileRecord, Role
from .exceptions import ProfileStoreError

__all__ = [
    # Interface
    "IProfileStore",
    # Models
    "ProfileRecord",
    "Role",
    # Exceptions
    "ProfileStoreError",
]
