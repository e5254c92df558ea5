"""Precise unit tests for HTTPClient.

Tests focus on session management, throttling, response hooks, and rate limiting.
"""

from __future__ import annotations

import asyncio
import time
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from gramkit.api.core import RateLimitError, TransportError
from gramkit.api.runtime.rest import HTTPClient


def make_response(status=200, body=b'{"status": "ok"}', headers=None):
    """Mock aiohttp response usable as an async context manager."""
    response = AsyncMock()
    response.status = status
    response.headers = headers or {}
    response.read = AsyncMock(return_value=body)
    response.raise_for_status = MagicMock()
    response.__aenter__ = AsyncMock(return_value=response)
    response.__aexit__ = AsyncMock(return_value=None)
    return response


def make_session(method="get", responses=None):
    session = MagicMock()
    session.closed = False
    setattr(session, method, MagicMock(side_effect=list(responses or [make_response()])))
    return session


class TestHTTPClientSessionManagement:
    """Test HTTPClient session management."""

    def test_init(self):
        """Test HTTPClient initialization."""
        client = HTTPClient(timeout=10.0)
        assert client.timeout.total == 10.0
        assert client._session is None
        assert client._response_hooks == []
        assert client._throttle_until is None

    @pytest.mark.asyncio
    async def test_session_property_creates_session(self):
        """Test session property creates session when needed."""
        client = HTTPClient()
        session = client.session
        assert isinstance(session, aiohttp.ClientSession)
        assert client._session is session
        await client.close()

    @pytest.mark.asyncio
    async def test_session_property_recreates_closed_session(self):
        """Test session property recreates closed session."""
        client = HTTPClient()
        session1 = client.session
        await session1.close()

        session2 = client.session
        assert session1 is not session2
        assert not session2.closed
        await client.close()

    @pytest.mark.asyncio
    async def test_close_idempotent(self):
        """Test close() can be called multiple times."""
        client = HTTPClient()
        await client.close()
        await client.close()

    @pytest.mark.asyncio
    async def test_context_manager(self):
        """Test HTTPClient as async context manager."""
        async with HTTPClient() as client:
            assert client.session is not None

        assert client._session is None or client._session.closed


class TestHTTPClientThrottling:
    """Test HTTPClient throttling functionality."""

    def test_set_throttle_zero_does_nothing(self):
        """Test set_throttle with 0 keeps the existing window."""
        client = HTTPClient()
        client.set_throttle(5.0)
        original = client._throttle_until

        client.set_throttle(0.0)
        assert client._throttle_until == original

    def test_set_throttle_extends_existing(self):
        """Test a longer throttle extends the window."""
        client = HTTPClient()
        client.set_throttle(5.0)
        first_end = client._throttle_until

        client.set_throttle(10.0)
        assert client._throttle_until > first_end

    @pytest.mark.asyncio
    async def test_request_respects_throttle(self):
        """Test request() waits for the throttle window."""
        client = HTTPClient()
        client.set_throttle(0.05)
        client._session = make_session()

        start = time.time()
        await client.request("GET", "https://api.example.com/test")
        elapsed = time.time() - start

        assert elapsed >= 0.04, f"Expected at least 0.04s, got {elapsed:.6f}s"
        assert client._throttle_until is None


class TestHTTPClientRequest:
    """Test request dispatch and error mapping."""

    @pytest.mark.asyncio
    async def test_returns_raw_body(self):
        """Test the raw response bytes are returned."""
        client = HTTPClient()
        client._session = make_session(responses=[make_response(body=b'{"a": 1}')])

        assert await client.request("GET", "https://api.example.com/test") == b'{"a": 1}'

    @pytest.mark.asyncio
    async def test_base_url_combined_with_relative_path(self):
        """Test relative paths are resolved against base_url."""
        client = HTTPClient(base_url="https://api.example.com")
        client._session = make_session()

        await client.request("GET", "api/v1/inbox/", params={"limit": "20"})

        args, kwargs = client._session.get.call_args
        assert args[0] == "https://api.example.com/api/v1/inbox/"
        assert kwargs["params"] == {"limit": "20"}

    @pytest.mark.asyncio
    async def test_post_sends_form_data(self):
        """Test POST bodies are sent as form data."""
        client = HTTPClient(base_url="https://api.example.com")
        client._session = make_session(method="post")

        await client.request("POST", "api/v1/x/", data={"k": "v"})

        _, kwargs = client._session.post.call_args
        assert kwargs["data"] == {"k": "v"}

    @pytest.mark.asyncio
    async def test_http_error_becomes_transport_error(self):
        """Test HTTP errors surface as TransportError with the status."""
        response = make_response(status=404)
        response.raise_for_status = MagicMock(
            side_effect=aiohttp.ClientResponseError(
                request_info=MagicMock(), history=(), status=404, message="Not Found"
            )
        )
        client = HTTPClient()
        client._session = make_session(responses=[response])

        with pytest.raises(TransportError) as exc_info:
            await client.request("GET", "https://api.example.com/missing")
        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_network_error_becomes_transport_error(self):
        """Test connection failures surface as TransportError."""
        client = HTTPClient()
        client._session = MagicMock()
        client._session.closed = False
        client._session.get = MagicMock(side_effect=aiohttp.ClientConnectionError("refused"))

        with pytest.raises(TransportError) as exc_info:
            await client.request("GET", "https://api.example.com/test")
        assert exc_info.value.status_code is None


class TestHTTPClientResponseHooks:
    """Test HTTPClient response hooks."""

    @pytest.mark.asyncio
    async def test_response_hook_called(self):
        """Test response hooks are called for each response."""
        client = HTTPClient()
        hook = MagicMock(return_value=None)
        client.add_response_hook(hook)
        response = make_response()
        client._session = make_session(responses=[response])

        await client.request("GET", "https://api.example.com/test")

        hook.assert_called_once_with(response)

    @pytest.mark.asyncio
    async def test_response_hook_async_returns_delay(self):
        """Test async hooks may return a throttle delay."""
        client = HTTPClient()

        async def async_hook(response):
            await asyncio.sleep(0)
            return 1.0

        client.add_response_hook(async_hook)
        client._session = make_session()

        await client.request("GET", "https://api.example.com/test")

        assert client._throttle_until is not None

    @pytest.mark.asyncio
    async def test_response_hook_exception_handled(self):
        """Test hook exceptions don't break requests."""
        client = HTTPClient()

        def failing_hook(response):
            raise Exception("Hook error")

        client.add_response_hook(failing_hook)
        client._session = make_session()

        assert await client.request("GET", "https://api.example.com/test") == b'{"status": "ok"}'


class TestHTTPClientRateLimiting:
    """Test HTTPClient rate limiting handling."""

    @pytest.mark.asyncio
    async def test_retries_after_429(self):
        """Test a 429 with Retry-After is retried."""
        client = HTTPClient()
        client._session = make_session(
            responses=[
                make_response(status=429, headers={"Retry-After": "0.01"}),
                make_response(body=b'{"data": "test"}'),
            ]
        )

        result = await client.request("GET", "https://api.example.com/test")

        assert result == b'{"data": "test"}'
        assert client._session.get.call_count == 2

    @pytest.mark.asyncio
    async def test_418_is_rate_limit(self):
        """Test 418 is handled like 429."""
        client = HTTPClient()
        client._session = make_session(
            method="post",
            responses=[
                make_response(status=418, headers={"Retry-After": "0.01"}),
                make_response(),
            ],
        )

        await client.request("POST", "https://api.example.com/test", data={"k": "v"})
        assert client._session.post.call_count == 2

    @pytest.mark.asyncio
    async def test_raises_after_retries_exhausted(self):
        """Test RateLimitError once retries are used up."""
        client = HTTPClient(max_rate_limit_retries=1)
        client._session = make_session(
            responses=[
                make_response(status=429, headers={"Retry-After": "0.01"}),
                make_response(status=429, headers={"Retry-After": "7"}),
            ]
        )

        with pytest.raises(RateLimitError) as exc_info:
            await client.request("GET", "https://api.example.com/test")
        assert exc_info.value.retry_after == 7.0
        assert exc_info.value.status_code == 429
