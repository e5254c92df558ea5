"""Unit tests for ClientConfig."""

from __future__ import annotations

import pytest

from gramkit.api.core import ClientConfig
from gramkit.api.core.config import API_VERSION, USER_AGENT


class TestClientConfig:
    """Test configuration defaults and validation."""

    def test_defaults(self):
        config = ClientConfig()
        assert config.base_url.startswith("https://")
        assert config.api_version == API_VERSION
        assert config.timeout == 30.0

    def test_default_headers(self):
        """Test default headers carry the app identity."""
        headers = ClientConfig(locale="it_IT", extra_headers={"X-Extra": "1"}).default_headers()
        assert headers["User-Agent"] == USER_AGENT
        assert headers["X-IG-App-Locale"] == "it_IT"
        assert headers["Accept-Language"] == "it-IT"
        assert headers["X-Extra"] == "1"

    def test_request_prefixes_version(self):
        """Test group base requests start with the version prefix."""
        request = ClientConfig().request("direct_v2")
        assert request.path_string == "api/v1/direct_v2"
        assert "User-Agent" in request.headers

    @pytest.mark.parametrize(
        "kwargs",
        [{"timeout": 0}, {"timeout": -1.0}, {"max_rate_limit_retries": -1}],
    )
    def test_invalid_values_rejected(self, kwargs):
        with pytest.raises(ValueError):
            ClientConfig(**kwargs)
