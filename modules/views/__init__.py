"""
Views module.

Chooses between the loading screen, the credential forms and the
client/driver dashboards from the synchronized session state.
"""

from .models import RenderedView, ViewKind
from .renderer import render_view, select_view

__all__ = [
    "RenderedView",
    "ViewKind",
    "render_view",
    "select_view",
]
