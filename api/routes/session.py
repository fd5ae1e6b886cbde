"""
Session state endpoints.

Expose the synchronized (profile, initializing) pair and the screen the
frontend should render for it.
"""

from fastapi import APIRouter, Depends

from modules.session.models import SessionState
from modules.session.synchronizer import SessionSynchronizer
from modules.views.models import RenderedView
from modules.views.renderer import render_view
from ..dependencies import get_session_synchronizer

router = APIRouter()


@router.get("/session", response_model=SessionState)
async def get_session_state(
    synchronizer: SessionSynchronizer = Depends(get_session_synchronizer),
) -> SessionState:
    """Current session state. The profile is unknown while initializing."""
    return synchronizer.state


@router.get("/view", response_model=RenderedView)
async def get_view(
    synchronizer: SessionSynchronizer = Depends(get_session_synchronizer),
) -> RenderedView:
    """Screen for the current session state."""
    return render_view(synchronizer.state)
