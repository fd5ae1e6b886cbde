"""
Supabase Auth implementation of the identity provider.

Wraps the synchronous Supabase client. Session-change callbacks from the
client (which may fire on its token refresh thread) are marshalled onto
the event loop that subscribed, and each notification runs as its own task.
"""

import asyncio
import logging
from typing import Any, Optional

import httpx
from supabase import AuthApiError, AuthError, AuthRetryableError, Client

from .exceptions import IdentityProviderError
from .interfaces import IIdentityProvider
from .models import ProviderErrorCode, Session, SessionListener, Unsubscribe

logger = logging.getLogger(__name__)

# Supabase Auth error codes -> normalized codes
SUPABASE_ERROR_CODES: dict[str, ProviderErrorCode] = {
    "email_address_invalid": ProviderErrorCode.INVALID_EMAIL,
    "user_banned": ProviderErrorCode.USER_DISABLED,
    "user_not_found": ProviderErrorCode.USER_NOT_FOUND,
    "invalid_credentials": ProviderErrorCode.WRONG_PASSWORD,
    "over_request_rate_limit": ProviderErrorCode.TOO_MANY_REQUESTS,
    "over_email_send_rate_limit": ProviderErrorCode.TOO_MANY_REQUESTS,
    "email_exists": ProviderErrorCode.EMAIL_ALREADY_IN_USE,
    "user_already_exists": ProviderErrorCode.EMAIL_ALREADY_IN_USE,
    "weak_password": ProviderErrorCode.WEAK_PASSWORD,
}


def translate_auth_error(error: Exception) -> IdentityProviderError:
    """Convert a Supabase client failure into an IdentityProviderError."""
    if isinstance(error, (AuthRetryableError, httpx.HTTPError)):
        return IdentityProviderError(ProviderErrorCode.NETWORK_REQUEST_FAILED, str(error))

    raw_code = getattr(error, "code", None)
    if raw_code in SUPABASE_ERROR_CODES:
        return IdentityProviderError(SUPABASE_ERROR_CODES[raw_code], str(error))

    if isinstance(error, AuthApiError) and error.status == 429:
        return IdentityProviderError(ProviderErrorCode.TOO_MANY_REQUESTS, str(error))

    return IdentityProviderError(raw_code or "unknown", str(error))


def session_from_user(user: Any, access_token: Optional[str] = None) -> Session:
    """Build a Session from a Supabase user object."""
    return Session(
        user_id=user.id,
        email=user.email or None,
        is_anonymous=bool(getattr(user, "is_anonymous", False)),
        access_token=access_token,
    )


def session_from_supabase(session: Any) -> Optional[Session]:
    """Build a Session from a Supabase session object, or None."""
    if session is None or session.user is None:
        return None
    return session_from_user(session.user, session.access_token)


class _SessionForwarder:
    """
    Forwards Supabase auth events for one subscriber.

    Only changes of the signed-in user are forwarded, so token refreshes
    for the same user do not trigger another profile resolution.
    """

    _UNSET = object()

    def __init__(self, listener: SessionListener, loop: asyncio.AbstractEventLoop):
        self._listener = listener
        self._loop = loop
        self._last_user: Any = self._UNSET
        self._tasks: set[asyncio.Task] = set()

    def on_auth_event(self, event: str, session: Any) -> None:
        """Supabase callback; may run on any thread."""
        logger.debug(f"Auth event: {event}")
        self._loop.call_soon_threadsafe(self.forward, session_from_supabase(session))

    def forward(self, session: Optional[Session]) -> None:
        user_id = session.user_id if session else None
        if user_id == self._last_user:
            return
        self._last_user = user_id

        task = self._loop.create_task(self._listener(session))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)


class SupabaseIdentityProvider(IIdentityProvider):
    """
    Identity provider backed by Supabase Auth.

    The wrapped client holds the process-wide current session.
    """

    def __init__(self, client: Client):
        self._client = client

    async def sign_in_with_password(self, email: str, password: str) -> Session:
        try:
            response = self._client.auth.sign_in_with_password(
                {"email": email, "password": password}
            )
        except (AuthError, httpx.HTTPError) as e:
            raise translate_auth_error(e) from e
        return self._session_from_response(response)

    async def create_account(self, email: str, password: str) -> Session:
        try:
            response = self._client.auth.sign_up({"email": email, "password": password})
        except (AuthError, httpx.HTTPError) as e:
            raise translate_auth_error(e) from e
        return self._session_from_response(response)

    async def redeem_custom_token(self, token: str) -> Session:
        try:
            # No refresh token: the session lasts as long as the redeemed token
            response = self._client.auth.set_session(token, "")
        except (AuthError, httpx.HTTPError) as e:
            raise translate_auth_error(e) from e
        return self._session_from_response(response)

    async def sign_in_anonymously(self) -> Session:
        try:
            response = self._client.auth.sign_in_anonymously()
        except (AuthError, httpx.HTTPError) as e:
            raise translate_auth_error(e) from e
        return self._session_from_response(response)

    async def sign_out(self) -> None:
        try:
            self._client.auth.sign_out()
        except (AuthError, httpx.HTTPError) as e:
            raise translate_auth_error(e) from e

    def subscribe(self, listener: SessionListener) -> Unsubscribe:
        forwarder = _SessionForwarder(listener, asyncio.get_running_loop())
        subscription = self._client.auth.on_auth_state_change(forwarder.on_auth_event)

        # Deliver the current (possibly restored) session first
        try:
            current = self._client.auth.get_session()
        except AuthError:
            logger.exception("Could not restore the current session")
            current = None
        forwarder.on_auth_event("INITIAL_SESSION", current)

        return subscription.unsubscribe

    def _session_from_response(self, response: Any) -> Session:
        if response.user is None:
            raise IdentityProviderError("missing-user", "Identity provider returned no user")
        access_token = response.session.access_token if response.session else None
        return session_from_user(response.user, access_token)
