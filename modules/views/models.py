"""Role-based view models."""

from enum import Enum
from typing import Optional
from pydantic import BaseModel

from modules.session.models import Profile


class ViewKind(str, Enum):
    """Top-level screen shown to the user."""

    LOADING = "loading"
    CREDENTIAL_FORMS = "credential_forms"
    CLIENT_DASHBOARD = "client_dashboard"
    DRIVER_DASHBOARD = "driver_dashboard"


class RenderedView(BaseModel):
    """Screen selected for the current session state."""

    kind: ViewKind
    title: str
    message: str
    profile: Optional[Profile] = None
