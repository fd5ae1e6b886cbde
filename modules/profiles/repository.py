"""
Profile repository for database access.

Encapsulates the Supabase queries for the profiles table. Each row is
one profile document keyed by (namespace, user_id); see
migrations/001_create_profiles.sql for the schema.
"""

import logging
from typing import Optional, Any

import httpx
from postgrest import APIError
from supabase import Client

from shared.repository import BaseRepository
from .exceptions import ProfileStoreError
from .interfaces import IProfileStore
from .models import ProfileRecord

logger = logging.getLogger(__name__)

KEY_COLUMNS = "namespace,user_id"


class ProfileRepository(BaseRepository[ProfileRecord], IProfileStore):
    """
    Repository for profile records.

    Note: This repository does NOT create default records. Deciding
    when a missing record is replaced by a default is the resolver's job.
    """

    def __init__(self, db: Client, table: str = "profiles") -> None:
        super().__init__(db, table)

    async def get_profile(self, namespace: str, user_id: str) -> Optional[ProfileRecord]:
        try:
            result = (
                self._query()
                .select("*")
                .eq("namespace", namespace)
                .eq("user_id", user_id)
                .limit(1)
                .execute()
            )
        except (APIError, httpx.HTTPError) as e:
            raise ProfileStoreError("read", user_id, str(e)) from e

        if not result.data:
            return None

        return self._map_to_record(result.data[0])

    async def set_profile(self, namespace: str, user_id: str, record: ProfileRecord) -> None:
        try:
            self._query().upsert(
                record.to_row(namespace, user_id),
                on_conflict=KEY_COLUMNS,
            ).execute()
        except (APIError, httpx.HTTPError) as e:
            raise ProfileStoreError("write", user_id, str(e)) from e

        logger.debug(f"Stored profile for {user_id} in namespace {namespace}")

    # -------------------------------------------------------------------------
    # Mapping helpers
    # -------------------------------------------------------------------------

    def _map_to_record(self, data: dict[str, Any]) -> ProfileRecord:
        """Map a database row to a ProfileRecord, dropping key columns."""
        return ProfileRecord(
            email=data.get("email"),
            role=data.get("role") or "client",
            created_at=data["created_at"],
            profile_image_url=data.get("profile_image_url") or "",
            is_verified=bool(data.get("is_verified", False)),
            is_onboarded=bool(data.get("is_onboarded", False)),
        )


# Module-level instance getter
_repository_instance: Optional[ProfileRepository] = None


def get_profile_repository() -> ProfileRepository:
    """Get the profile repository singleton."""
    global _repository_instance
    if _repository_instance is None:
        from shared.config import get_settings
        from shared.database import get_supabase_client

        _repository_instance = ProfileRepository(
            get_supabase_client(),
            table=get_settings().profiles_table,
        )
    return _repository_instance


def reset_profile_repository() -> None:
    """Reset the profile repository singleton (for testing)."""
    global _repository_instance
    _repository_instance = None
