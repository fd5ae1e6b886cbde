"""
Profiles module interface.

Other modules should depend on IProfileStore, not the Supabase repository.
This keeps the session synchronizer testable with an in-memory store.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import ProfileRecord


@runtime_checkable
class IProfileStore(Protocol):
    """
    Document store for profile records.

    Records are addressed by (namespace, user_id). Writes overwrite any
    existing record at the same key (last write wins).
    """

    async def get_profile(self, namespace: str, user_id: str) -> Optional[ProfileRecord]:
        """
        Fetch the profile record for a user.

        Returns:
            ProfileRecord if found, None otherwise

        Raises:
            ProfileStoreError: If the store cannot be reached
        """
        ...

    async def set_profile(self, namespace: str, user_id: str, record: ProfileRecord) -> None:
        """
        Create or overwrite the profile record for a user.

        Raises:
            ProfileStoreError: If the write fails
        """
        ...
