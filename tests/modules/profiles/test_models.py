"""Tests for profile record models."""

from datetime import datetime, timezone

from modules.profiles.models import ProfileRecord, Role


class TestProfileRecord:
    def test_defaults(self):
        """A bare record is an onboarding client with no image."""
        record = ProfileRecord(email="a@b.com")
        assert record.role == Role.CLIENT
        assert record.profile_image_url == ""
        assert record.is_onboarded is False
        assert record.created_at.tzinfo is not None

    def test_for_driver_is_unverified(self):
        record = ProfileRecord.for_role(Role.DRIVER, "driver@example.com")
        assert record.role == Role.DRIVER
        assert record.is_verified is False
        assert record.is_onboarded is False
        assert record.email == "driver@example.com"

    def test_for_client_is_verified(self):
        record = ProfileRecord.for_role(Role.CLIENT, "client@example.com")
        assert record.role == Role.CLIENT
        assert record.is_verified is True
        assert record.is_onboarded is False

    def test_to_row_includes_key_columns(self):
        created = datetime(2024, 1, 1, tzinfo=timezone.utc)
        record = ProfileRecord(email="a@b.com", role=Role.DRIVER, created_at=created, is_verified=False)

        row = record.to_row("app-1", "user-1")

        assert row == {
            "namespace": "app-1",
            "user_id": "user-1",
            "email": "a@b.com",
            "role": "driver",
            "created_at": "2024-01-01T00:00:00+00:00",
            "profile_image_url": "",
            "is_verified": False,
            "is_onboarded": False,
        }

    def test_role_parses_from_string(self):
        record = ProfileRecord(role="driver")
        assert record.role is Role.DRIVER
