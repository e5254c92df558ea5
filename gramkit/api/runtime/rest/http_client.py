"""Async HTTP client wrapper around aiohttp."""

from __future__ import annotations

import asyncio
import inspect
import logging
import time
from collections.abc import Awaitable, Callable, Mapping
from typing import Any

import aiohttp

from ...core.exceptions import RateLimitError, TransportError

logger = logging.getLogger(__name__)

# A hook may return a delay (seconds) to throttle subsequent requests
ResponseHook = Callable[[aiohttp.ClientResponse], float | None | Awaitable[float | None]]

_RATE_LIMIT_STATUSES = (418, 429)
_FALLBACK_RETRY_AFTER = 1.0


class HTTPClient:
    """Async HTTP client with lazy session, throttling and response hooks."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = 30.0,
        max_rate_limit_retries: int = 2,
    ) -> None:
        self.base_url = base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.max_rate_limit_retries = max_rate_limit_retries
        self._session: aiohttp.ClientSession | None = None
        self._response_hooks: list[ResponseHook] = []
        self._throttle_until: float | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    def add_response_hook(self, hook: ResponseHook) -> None:
        """Register a hook called with every response."""
        self._response_hooks.append(hook)

    def set_throttle(self, delay: float) -> None:
        """Delay the next request by ``delay`` seconds (never shortens a window)."""
        if delay <= 0:
            return
        until = time.time() + delay
        if self._throttle_until is None or until > self._throttle_until:
            self._throttle_until = until

    async def _wait_for_throttle(self) -> None:
        if self._throttle_until is None:
            return
        remaining = self._throttle_until - time.time()
        if remaining > 0:
            await asyncio.sleep(remaining)
        self._throttle_until = None

    async def _run_hooks(self, response: aiohttp.ClientResponse) -> None:
        for hook in self._response_hooks:
            try:
                delay = hook(response)
                if inspect.isawaitable(delay):
                    delay = await delay
            except Exception as e:
                logger.warning("Response hook failed: %s", e, exc_info=True)
                continue
            if delay:
                self.set_throttle(float(delay))

    def _resolve(self, url: str) -> str:
        # If base_url is set and url is relative, combine them
        if self.base_url and not url.startswith("http"):
            return f"{self.base_url.rstrip('/')}/{url.lstrip('/')}"
        return url

    async def request(
        self,
        method: str,
        url: str,
        *,
        params: Mapping[str, str] | None = None,
        data: Mapping[str, str] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> bytes:
        """Send a request and return the raw response body.

        Raises:
            RateLimitError: If the server keeps rate limiting after retries
            TransportError: On any other network or HTTP failure
        """
        url = self._resolve(url)
        send = getattr(self.session, method.lower())
        kwargs: dict[str, Any] = {"params": params, "headers": headers}
        if data is not None:
            kwargs["data"] = data

        attempts = 0
        while True:
            await self._wait_for_throttle()
            try:
                async with send(url, **kwargs) as response:
                    if response.status in _RATE_LIMIT_STATUSES:
                        retry_after = _parse_retry_after(response.headers.get("Retry-After"))
                        if attempts >= self.max_rate_limit_retries:
                            raise RateLimitError(
                                f"Rate limited on {method.upper()} {url}",
                                retry_after=retry_after,
                                status_code=response.status,
                            )
                        attempts += 1
                        logger.warning(
                            "rate_limited",
                            extra={
                                "method": method.upper(),
                                "status": response.status,
                                "retry_after": retry_after,
                                "attempt": attempts,
                            },
                        )
                        self.set_throttle(retry_after)
                        continue

                    await self._run_hooks(response)
                    response.raise_for_status()
                    return await response.read()
            except aiohttp.ClientResponseError as e:
                raise TransportError(
                    f"HTTP {e.status} on {method.upper()} {url}: {e.message}",
                    status_code=e.status,
                ) from e
            except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                raise TransportError(f"Request failed on {method.upper()} {url}: {e}") from e

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()


def _parse_retry_after(value: str | None) -> float:
    if not value:
        return _FALLBACK_RETRY_AFTER
    try:
        return max(float(value), 0.0)
    except ValueError:
        return _FALLBACK_RETRY_AFTER
