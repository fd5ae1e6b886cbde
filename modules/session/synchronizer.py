"""
Session synchronizer.

Keeps "current session" and "current profile" consistent. Every
session-change notification from the identity provider is resolved to a
profile (or None) and published to observers as a SessionState.

Notifications are numbered as they arrive. Resolutions may finish out of
order; a result is published only if no newer notification was observed
in the meantime.
"""

import asyncio
import itertools
import logging
from typing import Callable, Optional

from modules.identity.interfaces import IIdentityProvider
from modules.identity.models import Session, Unsubscribe

from .models import SessionState
from .resolver import ProfileResolver

logger = logging.getLogger(__name__)

StateListener = Callable[[SessionState], None]


class SessionSynchronizer:
    """
    Bridges identity provider sessions with stored profile records.

    State machine: UNINITIALIZED -> RESOLVED(profile | None). After the
    first resolution there is no intermediate loading state; later
    notifications replace the resolved value directly.
    """

    def __init__(
        self,
        identity: IIdentityProvider,
        resolver: ProfileResolver,
        bootstrap_token: Optional[str] = None,
    ):
        self._identity = identity
        self._resolver = resolver
        self._bootstrap_token = bootstrap_token

        self._state = SessionState()
        self._listeners: list[StateListener] = []
        self._sequence = itertools.count(1)
        self._latest_sequence = 0
        self._ready = asyncio.Event()
        self._started = False
        self._unsubscribe: Optional[Unsubscribe] = None

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    async def start(self) -> None:
        """
        Bootstrap the session and subscribe to session changes.

        Runs once; later calls do nothing. A failed bootstrap is logged and
        the subscription is still established, leaving the app usable in a
        signed-out state.
        """
        if self._started:
            return
        self._started = True

        try:
            if self._bootstrap_token:
                await self._identity.redeem_custom_token(self._bootstrap_token)
                logger.info("Session started from custom token")
            else:
                await self._identity.sign_in_anonymously()
                logger.info("Anonymous session started")
        except Exception:
            logger.exception("Session bootstrap failed")

        self._unsubscribe = self._identity.subscribe(self.handle_session_change)

    def stop(self) -> None:
        """Cancel the identity provider subscription."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    # -------------------------------------------------------------------------
    # Session changes
    # -------------------------------------------------------------------------

    async def handle_session_change(self, session: Optional[Session]) -> None:
        """Resolve a session-change notification and publish the result."""
        sequence = next(self._sequence)
        self._latest_sequence = sequence

        if session is None:
            logger.info("Session ended")
            self._publish(None)
            return

        logger.debug(f"Resolving profile for user {session.user_id} (#{sequence})")
        profile = await self._resolver.resolve(session)

        if sequence != self._latest_sequence:
            logger.debug(f"Discarding stale profile for user {session.user_id} (#{sequence})")
            return

        self._publish(profile)

    # -------------------------------------------------------------------------
    # Observers
    # -------------------------------------------------------------------------

    @property
    def state(self) -> SessionState:
        return self._state

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """
        Register a state listener.

        Returns:
            Callable that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def wait_until_ready(self) -> SessionState:
        """Wait for the first resolution and return the current state."""
        await self._ready.wait()
        return self._state

    def _publish(self, profile) -> None:
        self._state = SessionState(profile=profile, initializing=False)
        if not self._ready.is_set():
            self._ready.set()
            logger.info("Session state initialized")

        for listener in list(self._listeners):
            try:
                listener(self._state)
            except Exception:
                logger.exception("Session state listener failed")
