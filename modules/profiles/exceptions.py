"""Profiles module exceptions."""

from typing import Optional

from shared.exceptions import ExternalServiceError


class ProfileStoreError(ExternalServiceError):
    """Raised when the profile table cannot be read or written."""

    def __init__(self, operation: str, user_id: str, reason: Optional[str] = None):
        message = f"Profile {operation} failed for user {user_id}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(
            message,
            service="supabase",
            code="PROFILE_STORE_ERROR",
            details={"operation": operation, "user_id": user_id},
        )
