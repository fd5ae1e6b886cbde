"""
Session module.

Keeps the current provider session and the user's profile record in sync
and publishes the result for role-based rendering.

Public API:
- SessionSynchronizer: Observes session changes and publishes SessionState
- ProfileResolver: Get-or-create of the profile record with fallback
- Profile, ClientProfile, DriverProfile: Resolved profile variants
- SessionState: (profile-or-None, initializing) snapshot
"""

from .models import (
    BaseProfile,
    ClientProfile,
    DriverProfile,
    Profile,
    SessionState,
    build_profile,
    build_degraded_profile,
)
from .resolver import ProfileResolver
from .synchronizer import SessionSynchronizer

__all__ = [
    # Services
    "SessionSynchronizer",
    "ProfileResolver",
    # Models
    "BaseProfile",
    "ClientProfile",
    "DriverProfile",
    "Profile",
    "SessionState",
    "build_profile",
    "build_degraded_profile",
]
