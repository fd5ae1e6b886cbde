"""Tests for the session state and view endpoints."""

import pytest
from fastapi.testclient import TestClient

from api import app
from api.dependencies import get_session_synchronizer
from shared.config import get_settings
from modules.identity.models import Session
from modules.profiles.models import ProfileRecord, Role
from modules.session.resolver import ProfileResolver
from modules.session.synchronizer import SessionSynchronizer


@pytest.fixture
def synchronizer(identity, store, namespace):
    return SessionSynchronizer(identity, ProfileResolver(store, namespace))


@pytest.fixture
def client(synchronizer):
    app.dependency_overrides[get_session_synchronizer] = lambda: synchronizer
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestSessionRoute:
    def test_initializing(self, client):
        response = client.get("/api/session")

        assert response.status_code == 200
        assert response.json() == {"profile": None, "initializing": True}

    @pytest.mark.asyncio
    async def test_resolved_driver(self, client, synchronizer, store, namespace):
        store.records[(namespace, "driver-1")] = ProfileRecord.for_role(Role.DRIVER, "d@b.com")
        await synchronizer.handle_session_change(Session(user_id="driver-1", email="d@b.com"))

        data = client.get("/api/session").json()

        assert data["initializing"] is False
        assert data["profile"]["role"] == "driver"
        assert data["profile"]["is_verified"] is False


class TestViewRoute:
    def test_loading_view(self, client):
        assert client.get("/api/view").json()["kind"] == "loading"

    @pytest.mark.asyncio
    async def test_signed_out_view(self, client, synchronizer):
        await synchronizer.handle_session_change(None)

        data = client.get("/api/view").json()

        assert data["kind"] == "credential_forms"
        assert data["profile"] is None

    @pytest.mark.asyncio
    async def test_new_user_sees_client_dashboard(self, client, synchronizer):
        await synchronizer.handle_session_change(Session(user_id="new-user", email="n@b.com"))

        data = client.get("/api/view").json()

        assert data["kind"] == "client_dashboard"
        assert data["title"] == "Panel de Cliente"


class TestSessionSyncInactive:
    @pytest.fixture
    def plain_client(self):
        return TestClient(app)

    def test_unconfigured_supabase(self, plain_client, monkeypatch):
        for name in ("SUPABASE_URL", "SUPABASE_ANON_KEY", "SUPABASE_SERVICE_ROLE_KEY"):
            monkeypatch.delenv(name, raising=False)
        get_settings.cache_clear()

        for path in ("/api/session", "/api/view"):
            response = plain_client.get(path)
            assert response.status_code == 503
            assert response.json()["detail"] == "Session synchronization is disabled"

    def test_sync_disabled(self, plain_client, monkeypatch):
        monkeypatch.setenv("SUPABASE_URL", "https://test.supabase.co")
        monkeypatch.setenv("SUPABASE_ANON_KEY", "anon")
        monkeypatch.setenv("SUPABASE_SERVICE_ROLE_KEY", "service")
        monkeypatch.setenv("ENABLE_SESSION_SYNC", "false")
        get_settings.cache_clear()

        assert plain_client.get("/api/view").status_code == 503
