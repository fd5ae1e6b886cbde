"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.

The Supabase clients are created once here and passed into the services;
no module reaches for a global client on its own.
"""

from typing import TYPE_CHECKING, Optional

from fastapi import Depends, HTTPException, status

from shared.config import Settings, get_settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.forms.interfaces import ICredentialForms
    from modules.identity.interfaces import IIdentityProvider
    from modules.profiles.interfaces import IProfileStore
    from modules.session.resolver import ProfileResolver
    from modules.session.synchronizer import SessionSynchronizer


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container.
    Use reset() to clear all cached services for testing.
    """

    def __init__(self) -> None:
        self._identity: "IIdentityProvider | None" = None
        self._profiles: "IProfileStore | None" = None
        self._resolver: "ProfileResolver | None" = None
        self._synchronizer: "SessionSynchronizer | None" = None
        self._forms: "ICredentialForms | None" = None

    @property
    def identity(self) -> "IIdentityProvider":
        """Get the identity provider instance."""
        if self._identity is None:
            from modules.identity.provider import SupabaseIdentityProvider
            from shared.database import get_supabase_auth_client
            self._identity = SupabaseIdentityProvider(get_supabase_auth_client())
        return self._identity

    @property
    def profiles(self) -> "IProfileStore":
        """Get the profile store instance."""
        if self._profiles is None:
            from modules.profiles.repository import get_profile_repository
            self._profiles = get_profile_repository()
        return self._profiles

    @property
    def resolver(self) -> "ProfileResolver":
        """Get the profile resolver instance."""
        if self._resolver is None:
            from modules.session.resolver import ProfileResolver
            from shared.config import get_settings
            self._resolver = ProfileResolver(
                self.profiles,
                namespace=get_settings().app_namespace,
            )
        return self._resolver

    @property
    def synchronizer(self) -> "SessionSynchronizer":
        """Get the session synchronizer instance."""
        if self._synchronizer is None:
            from modules.session.synchronizer import SessionSynchronizer
            from shared.config import get_settings
            self._synchronizer = SessionSynchronizer(
                identity=self.identity,
                resolver=self.resolver,
                bootstrap_token=get_settings().initial_auth_token,
            )
        return self._synchronizer

    @property
    def forms(self) -> "ICredentialForms":
        """Get the credential forms service instance."""
        if self._forms is None:
            from modules.forms.service import CredentialFormsService
            from shared.config import get_settings
            settings = get_settings()
            self._forms = CredentialFormsService(
                identity=self.identity,
                profiles=self.profiles,
                namespace=settings.app_namespace,
                registration_policy=settings.registration_password_policy,
            )
        return self._forms

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._identity = None
        self._profiles = None
        self._resolver = None
        self._synchronizer = None
        self._forms = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_forms_service() -> "ICredentialForms":
    """FastAPI dependency for credential forms."""
    return get_container().forms


def get_active_synchronizer(
    settings: Settings = Depends(get_settings),
) -> Optional["SessionSynchronizer"]:
    """The session synchronizer, or None when session sync is off or unconfigured."""
    if not settings.session_sync_active:
        return None
    return get_container().synchronizer


def get_session_synchronizer(
    synchronizer: Optional["SessionSynchronizer"] = Depends(get_active_synchronizer),
) -> "SessionSynchronizer":
    """
    FastAPI dependency for the session synchronizer.

    Raises:
        HTTPException: 503 if session sync is not running
    """
    if synchronizer is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Session synchronization is disabled",
        )
    return synchronizer


def get_profile_resolver() -> "ProfileResolver":
    """FastAPI dependency for the profile resolver."""
    return get_container().resolver
