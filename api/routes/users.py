"""
User-related endpoints.

Provides the profile of the caller identified by a Supabase access token.
"""

from fastapi import APIRouter, Depends

from modules.identity.models import Session
from modules.session.models import Profile
from modules.session.resolver import ProfileResolver
from shared.models import AuthenticatedUser
from ..dependencies import get_profile_resolver
from ..middleware.auth import get_current_user

router = APIRouter()


@router.get("/me", response_model=Profile)
async def get_current_user_profile(
    user: AuthenticatedUser = Depends(get_current_user),
    resolver: ProfileResolver = Depends(get_profile_resolver),
) -> Profile:
    """
    Get the current user's profile.

    Creates the default client profile record on first access. Requires
    authentication.
    """
    session = Session(user_id=user.id, email=user.email, is_anonymous=user.is_anonymous)
    return await resolver.resolve(session)
