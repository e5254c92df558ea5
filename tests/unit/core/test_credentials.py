"""Unit tests for Credentials and Device."""

from __future__ import annotations

from uuid import UUID

import pytest
from pydantic import ValidationError

from gramkit.api.core import Credentials, Device


class TestDevice:
    """Test device identity."""

    def test_vendor_identifier_is_stable(self):
        """Test the vendor identifier derives deterministically from the UUID."""
        identifier = UUID("12345678-1234-5678-1234-567812345678")
        first = Device(identifier=identifier).vendor_identifier
        second = Device(identifier=identifier).vendor_identifier

        assert first == second
        assert first.startswith("android-")
        assert len(first) == len("android-") + 16

    def test_default_devices_differ(self):
        """Test each default device gets a fresh identifier."""
        assert Device().identifier != Device().identifier


class TestCredentials:
    """Test credential accessors."""

    def test_cookie_lookup(self, credentials):
        """Test item access reads cookies."""
        assert credentials["sessionid"] == "session-secret"
        assert credentials["missing"] is None
        assert credentials.identifier == "42"

    def test_header(self, credentials):
        """Test header() builds the Cookie header plus rotating headers."""
        header = credentials.header()
        assert header["Cookie"] == "sessionid=session-secret; csrftoken=csrf-token; ds_user_id=42"
        assert header["Authorization"] == "Bearer IGT:2:token"

    def test_header_without_cookies(self):
        """Test no Cookie header is produced for empty cookies."""
        assert "Cookie" not in Credentials().header()

    def test_session_fields(self, credentials):
        """Test session body fields."""
        fields = credentials.session_fields()
        assert fields["_csrftoken"] == "csrf-token"
        assert fields["_uuid"] == "12345678-1234-5678-1234-567812345678"
        assert fields["device_id"] == credentials.device.vendor_identifier

    def test_values_hidden_from_repr_and_str(self, credentials):
        """Test secrets never appear in repr or str."""
        assert "session-secret" not in repr(credentials)
        assert "session-secret" not in str(credentials)
        assert "sessionid" in str(credentials)

    def test_frozen(self, credentials):
        """Test credentials are immutable."""
        with pytest.raises(ValidationError):
            credentials.cookies = {}
