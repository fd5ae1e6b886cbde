"""Tests for the credential form endpoints."""

import pytest
from fastapi.testclient import TestClient

from api import app
from api.dependencies import get_forms_service
from modules.forms.service import CredentialFormsService
from modules.identity.exceptions import IdentityProviderError
from modules.identity.models import ProviderErrorCode


@pytest.fixture
def client(identity, store, namespace):
    service = CredentialFormsService(identity=identity, profiles=store, namespace=namespace)
    app.dependency_overrides[get_forms_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestLoginRoute:
    def test_login_success(self, client, identity):
        identity.add_account("a@b.com", "secret1")

        response = client.post("/api/auth/login", json={"email": "a@b.com", "password": "secret1"})

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "message": "¡Inicio de sesión exitoso!",
            "message_type": "success",
        }

    def test_login_short_password(self, client, identity):
        response = client.post("/api/auth/login", json={"email": "a@b.com", "password": "abc"})

        assert response.status_code == 400
        assert response.json()["success"] is False
        assert response.json()["message_type"] == "error"
        assert identity.calls == []

    def test_login_network_failure(self, client, identity):
        identity.errors["sign_in_with_password"] = IdentityProviderError(
            ProviderErrorCode.NETWORK_REQUEST_FAILED
        )

        response = client.post("/api/auth/login", json={"email": "a@b.com", "password": "secret1"})

        assert response.status_code == 400
        assert response.json()["message"] == "Problema de conexión a la red. Inténtalo de nuevo."

    def test_login_missing_field(self, client):
        response = client.post("/api/auth/login", json={"email": "a@b.com"})
        assert response.status_code == 422

    def test_each_request_gets_a_fresh_form(self, client, identity):
        identity.add_account("a@b.com", "secret1")
        body = {"email": "a@b.com", "password": "secret1", "in_flight": True}

        first = client.post("/api/auth/login", json=body)
        second = client.post("/api/auth/login", json=body)

        assert first.status_code == second.status_code == 200
        assert len(identity.calls) == 2


class TestRegisterRoute:
    def test_register_driver(self, client, store, namespace):
        response = client.post(
            "/api/auth/register",
            json={
                "email": "a@b.com",
                "password": "Abc123!@",
                "confirm_password": "Abc123!@",
                "role": "driver",
            },
        )

        assert response.status_code == 201
        assert response.json()["success"] is True
        record = next(iter(store.records.values()))
        assert record.role.value == "driver"
        assert record.is_verified is False

    def test_register_password_mismatch(self, client, identity):
        response = client.post(
            "/api/auth/register",
            json={"email": "a@b.com", "password": "Abc123!@", "confirm_password": "nope"},
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Las contraseñas no coinciden."
        assert identity.calls == []

    def test_register_unknown_role(self, client):
        response = client.post(
            "/api/auth/register",
            json={
                "email": "a@b.com",
                "password": "Abc123!@",
                "confirm_password": "Abc123!@",
                "role": "admin",
            },
        )
        assert response.status_code == 422


class TestLogoutRoute:
    def test_logout(self, client, identity):
        response = client.post("/api/auth/logout")

        assert response.status_code == 204
        assert identity.calls == [("sign_out",)]

    def test_logout_provider_error(self, client, identity):
        identity.errors["sign_out"] = IdentityProviderError(ProviderErrorCode.NETWORK_REQUEST_FAILED)

        response = client.post("/api/auth/logout")

        assert response.status_code == 401
        assert response.json()["error"] == "network-request-failed"
