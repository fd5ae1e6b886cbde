"""
Profile resolution for an authenticated session.

Get-or-create of the profile record with a fallback. There is no
transactional guard: two concurrent resolutions for a new user may both
write the default record, and the store's last-write-wins upsert makes
that an idempotent overwrite.
"""

import logging
from typing import Union

from modules.identity.models import Session
from modules.profiles.interfaces import IProfileStore
from modules.profiles.models import ProfileRecord, Role

from .models import ClientProfile, DriverProfile, build_degraded_profile, build_profile

logger = logging.getLogger(__name__)


class ProfileResolver:
    """Turns a session into a profile, creating the record on first sight."""

    def __init__(self, store: IProfileStore, namespace: str):
        self._store = store
        self._namespace = namespace

    @property
    def namespace(self) -> str:
        return self._namespace

    async def resolve(self, session: Session) -> Union[ClientProfile, DriverProfile]:
        """
        Resolve the profile for a session.

        Never raises for store failures: the error is logged and a
        degraded client profile is returned instead.
        """
        try:
            record = await self._store.get_profile(self._namespace, session.user_id)
            if record is None:
                record = ProfileRecord.for_role(Role.CLIENT, session.email)
                await self._store.set_profile(self._namespace, session.user_id, record)
                logger.warning(
                    f"No profile record for user {session.user_id}; "
                    f"created default '{record.role.value}' record"
                )
            return build_profile(session, record)
        except Exception:
            logger.exception(
                f"Failed to get or create profile for user {session.user_id}; "
                "falling back to client role"
            )
            return build_degraded_profile(session)
