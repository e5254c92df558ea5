"""Transport contract and the default aiohttp-backed transport."""

from __future__ import annotations

import logging
from time import perf_counter
from typing import Protocol, runtime_checkable

from ...core.config import ClientConfig
from ...core.request import RequestSpec
from .http_client import HTTPClient, ResponseHook

logger = logging.getLogger(__name__)


@runtime_checkable
class Transport(Protocol):
    """Anything that can execute a RequestSpec and return the raw body.

    Implementations raise TransportError on failure and may be called
    concurrently.
    """

    async def execute(self, request: RequestSpec) -> bytes: ...


class RESTTransport:
    """Transport executing requests through HTTPClient."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 30.0,
        max_rate_limit_retries: int = 2,
    ) -> None:
        self._http = HTTPClient(
            base_url=base_url,
            timeout=timeout,
            max_rate_limit_retries=max_rate_limit_retries,
        )

    @classmethod
    def from_config(cls, config: ClientConfig) -> RESTTransport:
        """Create a transport for ``config``'s host and limits."""
        return cls(
            config.base_url,
            timeout=config.timeout,
            max_rate_limit_retries=config.max_rate_limit_retries,
        )

    def add_response_hook(self, hook: ResponseHook) -> None:
        self._http.add_response_hook(hook)

    async def execute(self, request: RequestSpec) -> bytes:
        method = request.resolved_method
        start = perf_counter()
        data = await self._http.request(
            method,
            request.path_string,
            params=dict(request.query) or None,
            data=dict(request.body) if request.body else None,
            headers=dict(request.headers) or None,
        )
        logger.debug(
            "request_executed",
            extra={
                "method": method,
                "path": request.path_string,
                "bytes": len(data),
                "latency_ms": (perf_counter() - start) * 1000.0,
            },
        )
        return data

    async def close(self) -> None:
        await self._http.close()

    async def __aenter__(self) -> RESTTransport:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
