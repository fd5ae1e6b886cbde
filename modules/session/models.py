"""
Session module data models.

A Profile is the merge of the provider session with the stored profile
record. Its variant (client or driver) is decided once, when the profile
is built, so consumers never inspect a raw role string.
"""

from datetime import datetime
from typing import Annotated, Literal, Optional, Union
from pydantic import BaseModel, Field

from modules.identity.models import Session
from modules.profiles.models import ProfileRecord, Role


class BaseProfile(BaseModel):
    """Fields shared by every profile variant."""

    user_id: str = Field(..., description="Provider user ID")
    email: Optional[str] = Field(None, description="Session email")
    is_anonymous: bool = Field(default=False, description="Anonymous session")
    created_at: Optional[datetime] = Field(None, description="Record creation time")
    profile_image_url: str = Field(default="", description="Profile image reference")
    is_verified: bool = Field(default=False, description="Verified by the operator")
    is_onboarded: bool = Field(default=False, description="Onboarding completed")
    degraded: bool = Field(
        default=False,
        description="Built without a stored record because the store failed",
    )

    model_config = {"frozen": True}


class ClientProfile(BaseProfile):
    """Profile of a passenger."""

    role: Literal["client"] = "client"


class DriverProfile(BaseProfile):
    """Profile of a taxi driver."""

    role: Literal["driver"] = "driver"


Profile = Annotated[Union[ClientProfile, DriverProfile], Field(discriminator="role")]


class SessionState(BaseModel):
    """
    Snapshot published by the session synchronizer.

    While `initializing` is True the profile is unknown, not absent.
    """

    profile: Optional[Profile] = None
    initializing: bool = True

    model_config = {"frozen": True}


def build_profile(session: Session, record: ProfileRecord) -> Union[ClientProfile, DriverProfile]:
    """Merge a session with its stored record into the matching variant."""
    profile_class = DriverProfile if record.role == Role.DRIVER else ClientProfile
    return profile_class(
        user_id=session.user_id,
        email=session.email,
        is_anonymous=session.is_anonymous,
        created_at=record.created_at,
        profile_image_url=record.profile_image_url,
        is_verified=record.is_verified,
        is_onboarded=record.is_onboarded,
    )


def build_degraded_profile(session: Session) -> ClientProfile:
    """Client profile from session attributes alone."""
    return ClientProfile(
        user_id=session.user_id,
        email=session.email,
        is_anonymous=session.is_anonymous,
        degraded=True,
    )
