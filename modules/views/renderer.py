"""
Role-based renderer.

Picks the screen for a session state. Any resolved profile that is not a
driver gets the client dashboard.
"""

from modules.session.models import DriverProfile, SessionState

from .models import RenderedView, ViewKind

VIEW_TEXT: dict[ViewKind, tuple[str, str]] = {
    ViewKind.LOADING: ("Cargando", "Cargando autenticación..."),
    ViewKind.CREDENTIAL_FORMS: ("Inicia sesión", "¿No tienes cuenta? Regístrate aquí."),
    ViewKind.CLIENT_DASHBOARD: (
        "Panel de Cliente",
        "¡Bienvenido, cliente! Aquí podrás solicitar tu taxi.",
    ),
    ViewKind.DRIVER_DASHBOARD: (
        "Panel de Taxista",
        "¡Bienvenido, taxista! Aquí podrás ver y aceptar servicios.",
    ),
}


def select_view(state: SessionState) -> ViewKind:
    if state.initializing:
        return ViewKind.LOADING
    if state.profile is None:
        return ViewKind.CREDENTIAL_FORMS
    if isinstance(state.profile, DriverProfile):
        return ViewKind.DRIVER_DASHBOARD
    return ViewKind.CLIENT_DASHBOARD


def render_view(state: SessionState) -> RenderedView:
    """Render the screen for the given session state."""
    kind = select_view(state)
    title, message = VIEW_TEXT[kind]
    return RenderedView(
        kind=kind,
        title=title,
        message=message,
        profile=state.profile if not state.initializing else None,
    )
