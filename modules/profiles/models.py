"""
Profiles module data models.

A profile record is the application-owned document describing a user's
role and onboarding status, stored once per (namespace, user_id).
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional, Any
from pydantic import BaseModel, Field


class Role(str, Enum):
    """Role chosen at registration. Decides which dashboard applies."""

    CLIENT = "client"
    DRIVER = "driver"


class ProfileRecord(BaseModel):
    """Stored profile document (without its key)."""

    email: Optional[str] = Field(None, description="Email at creation time")
    role: Role = Field(default=Role.CLIENT, description="User role")
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Record creation time",
    )
    profile_image_url: str = Field(default="", description="Profile image reference")
    is_verified: bool = Field(default=True, description="Verified by the operator")
    is_onboarded: bool = Field(default=False, description="Onboarding completed")

    @classmethod
    def for_role(cls, role: Role, email: Optional[str]) -> "ProfileRecord":
        """
        Build a fresh record for a role.

        Drivers start unverified until an operator checks their documents;
        clients are verified immediately.
        """
        return cls(
            email=email,
            role=role,
            is_verified=role != Role.DRIVER,
            is_onboarded=False,
        )

    def to_row(self, namespace: str, user_id: str) -> dict[str, Any]:
        """Serialize to a table row including its key columns."""
        return {
            "namespace": namespace,
            "user_id": user_id,
            "email": self.email,
            "role": self.role.value,
            "created_at": self.created_at.isoformat(),
            "profile_image_url": self.profile_image_url,
            "is_verified": self.is_verified,
            "is_onboarded": self.is_onboarded,
        }
