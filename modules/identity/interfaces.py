"""
Identity module interface.

Other modules should depend on IIdentityProvider, not the Supabase adapter.
This enables testing with fakes and swapping the auth platform.
"""

from typing import Protocol, runtime_checkable

from .models import Session, SessionListener, Unsubscribe


@runtime_checkable
class IIdentityProvider(Protocol):
    """
    Interface for identity provider operations.

    Every sign-in method establishes the provider's current session and
    results in a session-change notification to subscribers.
    """

    async def sign_in_with_password(self, email: str, password: str) -> Session:
        """
        Verify credentials and start a session.

        Raises:
            IdentityProviderError: If the credentials are rejected
        """
        ...

    async def create_account(self, email: str, password: str) -> Session:
        """
        Create a new account with email and password.

        Raises:
            IdentityProviderError: If the account cannot be created
        """
        ...

    async def redeem_custom_token(self, token: str) -> Session:
        """Start a session from an externally issued access token."""
        ...

    async def sign_in_anonymously(self) -> Session:
        """Start an anonymous session."""
        ...

    async def sign_out(self) -> None:
        """End the current session."""
        ...

    def subscribe(self, listener: SessionListener) -> Unsubscribe:
        """
        Subscribe to session changes.

        The listener is first called with the current session (or None),
        then once per sign-in or sign-out, in the order they happened.

        Returns:
            Callable that cancels the subscription
        """
        ...
