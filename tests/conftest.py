"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules:
in-memory stand-ins for the identity provider and the profile store, and
token helpers for the bearer-auth middleware.
"""

import asyncio
import itertools
from datetime import datetime, timezone, timedelta
from typing import Optional

import pytest
from jose import jwt

from api.dependencies import reset_container
from modules.identity.exceptions import IdentityProviderError
from modules.identity.models import Session, SessionListener, Unsubscribe
from modules.profiles.exceptions import ProfileStoreError
from modules.profiles.models import ProfileRecord
from modules.profiles.repository import reset_profile_repository
from shared.config import get_settings
from shared.database import reset_client_cache


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"
TEST_NAMESPACE = "test-app"


def create_test_token(
    user_id: str = "test-user-123",
    email: str = "test@example.com",
    expired: bool = False,
    is_anonymous: bool = False,
) -> str:
    """Create a Supabase-style access token signed with TEST_JWT_SECRET."""
    now = datetime.now(timezone.utc)
    exp = now - timedelta(hours=1) if expired else now + timedelta(hours=1)

    payload = {
        "sub": user_id,
        "email": email,
        "is_anonymous": is_anonymous,
        "aud": "authenticated",
        "role": "authenticated",
        "exp": int(exp.timestamp()),
        "iat": int(now.timestamp()),
    }
    return jwt.encode(payload, TEST_JWT_SECRET, algorithm="HS256")


class FakeIdentityProvider:
    """
    In-memory identity provider.

    Accounts live in a dict; every sign-in or sign-out notifies
    subscribers through scheduled tasks, like the Supabase adapter does.
    Call `await provider.drain()` to let pending notifications finish.
    """

    def __init__(self) -> None:
        self.accounts: dict[str, tuple[str, str]] = {}  # email -> (password, user_id)
        self.current: Optional[Session] = None
        self.calls: list[tuple] = []
        self.errors: dict[str, IdentityProviderError] = {}
        self._listeners: list[SessionListener] = []
        self._tasks: list[asyncio.Task] = []
        self._ids = itertools.count(1)

    def add_account(self, email: str, password: str, user_id: Optional[str] = None) -> str:
        user_id = user_id or f"user-{next(self._ids)}"
        self.accounts[email] = (password, user_id)
        return user_id

    async def sign_in_with_password(self, email: str, password: str) -> Session:
        self.calls.append(("sign_in_with_password", email, password))
        self._raise_if_failing("sign_in_with_password")
        if email not in self.accounts:
            raise IdentityProviderError("user-not-found")
        stored_password, user_id = self.accounts[email]
        if stored_password != password:
            raise IdentityProviderError("wrong-password")
        return self._start(Session(user_id=user_id, email=email))

    async def create_account(self, email: str, password: str) -> Session:
        self.calls.append(("create_account", email, password))
        self._raise_if_failing("create_account")
        if email in self.accounts:
            raise IdentityProviderError("email-already-in-use")
        user_id = self.add_account(email, password)
        return self._start(Session(user_id=user_id, email=email))

    async def redeem_custom_token(self, token: str) -> Session:
        self.calls.append(("redeem_custom_token", token))
        self._raise_if_failing("redeem_custom_token")
        return self._start(Session(user_id=f"token-{token}", email=None))

    async def sign_in_anonymously(self) -> Session:
        self.calls.append(("sign_in_anonymously",))
        self._raise_if_failing("sign_in_anonymously")
        return self._start(Session(user_id=f"anon-{next(self._ids)}", is_anonymous=True))

    async def sign_out(self) -> None:
        self.calls.append(("sign_out",))
        self._raise_if_failing("sign_out")
        self.current = None
        self._notify(None)

    def subscribe(self, listener: SessionListener) -> Unsubscribe:
        self._listeners.append(listener)
        self._schedule(listener, self.current)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    async def drain(self) -> None:
        while self._tasks:
            tasks, self._tasks = self._tasks, []
            await asyncio.gather(*tasks)

    def _start(self, session: Session) -> Session:
        self.current = session
        self._notify(session)
        return session

    def _notify(self, session: Optional[Session]) -> None:
        for listener in list(self._listeners):
            self._schedule(listener, session)

    def _schedule(self, listener: SessionListener, session: Optional[Session]) -> None:
        self._tasks.append(asyncio.get_running_loop().create_task(listener(session)))

    def _raise_if_failing(self, operation: str) -> None:
        if operation in self.errors:
            raise self.errors[operation]


class FakeProfileStore:
    """In-memory profile store with switchable failures."""

    def __init__(self) -> None:
        self.records: dict[tuple[str, str], ProfileRecord] = {}
        self.get_calls: list[tuple[str, str]] = []
        self.set_calls: list[tuple[str, str, ProfileRecord]] = []
        self.fail_get = False
        self.fail_set = False

    async def get_profile(self, namespace: str, user_id: str) -> Optional[ProfileRecord]:
        self.get_calls.append((namespace, user_id))
        if self.fail_get:
            raise ProfileStoreError("read", user_id, "connection refused")
        return self.records.get((namespace, user_id))

    async def set_profile(self, namespace: str, user_id: str, record: ProfileRecord) -> None:
        self.set_calls.append((namespace, user_id, record))
        if self.fail_set:
            raise ProfileStoreError("write", user_id, "permission denied")
        self.records[(namespace, user_id)] = record


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset cached settings, clients and services around each test."""
    get_settings.cache_clear()
    reset_client_cache()
    reset_profile_repository()
    reset_container()
    yield
    get_settings.cache_clear()
    reset_client_cache()
    reset_profile_repository()
    reset_container()


@pytest.fixture
def namespace() -> str:
    return TEST_NAMESPACE


@pytest.fixture
def identity() -> FakeIdentityProvider:
    return FakeIdentityProvider()


@pytest.fixture
def store() -> FakeProfileStore:
    return FakeProfileStore()


@pytest.fixture
def auth_token() -> str:
    """Create a valid auth token for testing."""
    return create_test_token()


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers with a valid token."""
    return {"Authorization": f"Bearer {auth_token}"}


@pytest.fixture
def jwt_secret() -> str:
    return TEST_JWT_SECRET


@pytest.fixture
def token_factory():
    """Factory for access tokens with custom claims."""
    return create_test_token
