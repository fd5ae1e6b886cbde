"""Tests for shared/config.py."""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from shared.config import PasswordPolicy, Settings, get_settings


class TestSettings:
    def test_default_values(self):
        """Settings should have sensible defaults."""
        settings = Settings(_env_file=None)
        assert settings.app_name == "Ridehail API"
        assert settings.app_version == "0.1.0"
        assert settings.debug is False
        assert settings.port == 8000
        assert settings.app_namespace == "default-app-id"
        assert settings.profiles_table == "profiles"
        assert settings.initial_auth_token is None
        assert settings.registration_password_policy == PasswordPolicy.STRICT
        assert settings.enable_session_sync is True

    def test_loads_from_env(self):
        """Settings should load from environment variables."""
        with patch.dict(os.environ, {
            "DEBUG": "true",
            "PORT": "9000",
            "APP_NAMESPACE": "taxi-prod",
            "INITIAL_AUTH_TOKEN": "bootstrap-token",
            "REGISTRATION_PASSWORD_POLICY": "basic",
        }):
            settings = Settings(_env_file=None)
            assert settings.debug is True
            assert settings.port == 9000
            assert settings.app_namespace == "taxi-prod"
            assert settings.initial_auth_token == "bootstrap-token"
            assert settings.registration_password_policy == PasswordPolicy.BASIC

    def test_rejects_unknown_password_policy(self):
        with patch.dict(os.environ, {"REGISTRATION_PASSWORD_POLICY": "none"}):
            with pytest.raises(ValidationError):
                Settings(_env_file=None)

    def test_supabase_configured(self):
        settings = Settings(
            _env_file=None,
            supabase_url="https://test.supabase.co",
            supabase_anon_key="anon",
            supabase_service_role_key="service",
        )
        assert settings.supabase_configured is True

    def test_supabase_not_configured_without_keys(self):
        settings = Settings(_env_file=None, supabase_url="https://test.supabase.co")
        assert settings.supabase_configured is False


class TestGetSettings:
    def test_get_settings_caches(self):
        """get_settings should return cached instance."""
        get_settings.cache_clear()
        assert get_settings() is get_settings()


class TestSessionSyncActive:
    def test_requires_supabase(self):
        assert Settings(_env_file=None, supabase_url="").session_sync_active is False

    def test_respects_feature_flag(self):
        settings = Settings(
            _env_file=None,
            supabase_url="https://test.supabase.co",
            supabase_anon_key="anon",
            supabase_service_role_key="service",
            enable_session_sync=False,
        )
        assert settings.session_sync_active is False

    def test_active_when_configured_and_enabled(self):
        settings = Settings(
            _env_file=None,
            supabase_url="https://test.supabase.co",
            supabase_anon_key="anon",
            supabase_service_role_key="service",
        )
        assert settings.session_sync_active is True
