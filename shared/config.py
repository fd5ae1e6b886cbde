"""
Centralized configuration for the Ridehail backend.

All settings are loaded from environment variables with sensible defaults.
Module-specific settings should be namespaced (e.g., SUPABASE_*).
"""

from enum import Enum
from functools import lru_cache
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class PasswordPolicy(str, Enum):
    """Password rule sets accepted by the credential forms."""

    STRICT = "strict"  # >= 8 chars, upper, lower, digit, symbol
    BASIC = "basic"  # >= 6 chars


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Ridehail API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Supabase
    supabase_url: str = ""
    supabase_anon_key: str = ""
    supabase_service_role_key: str = ""
    supabase_jwt_secret: str = ""

    # Profile storage. Every deployment sharing one database gets its own namespace.
    app_namespace: str = "default-app-id"
    profiles_table: str = "profiles"

    # Session bootstrap: redeemed at startup when set, anonymous sign-in otherwise
    initial_auth_token: Optional[str] = None

    # Credential forms
    registration_password_policy: PasswordPolicy = PasswordPolicy.STRICT

    # Feature Flags
    enable_session_sync: bool = True

    @property
    def supabase_configured(self) -> bool:
        """Whether enough Supabase settings are present to build clients."""
        return bool(
            self.supabase_url
            and self.supabase_anon_key
            and self.supabase_service_role_key
        )

    @property
    def session_sync_active(self) -> bool:
        """Whether the session synchronizer runs in this process."""
        return self.enable_session_sync and self.supabase_configured


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
