"""High-level client binding credentials, transport and route groups.

The route groups only describe requests; APIClient supplies the session
and the transport when they run:

    async with APIClient(credentials) as client:
        unit = await client.execute(client.users.summary("25025320"))
        async for collection in client.pages(client.users.search("sunset")):
            ...

A transport passed in by the caller is never closed by the client.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from ..core.config import ClientConfig
from ..core.credentials import Credentials
from ..endpoints import Direct, Discover, Friendships, Users, require_endpoint
from ..runtime.endpoint import Paginated, Single, paginated_endpoint, single_endpoint
from ..runtime.pagination import CursorPager, PagerState
from ..runtime.rest import RESTTransport, Transport

logger = logging.getLogger(__name__)

T = TypeVar("T")
C = TypeVar("C")


class APIClient:
    """Authenticated entry point to every route group."""

    def __init__(
        self,
        credentials: Credentials,
        transport: Transport | None = None,
        config: ClientConfig | None = None,
    ) -> None:
        self.credentials = credentials
        self.config = config or ClientConfig()
        self._owns_transport = transport is None
        self.transport: Transport = transport or RESTTransport.from_config(self.config)

        self.direct = Direct(self.config)
        self.users = Users(self.config)
        self.discover = Discover(self.config)
        self.friendships = Friendships(self.config)

    async def execute(self, single: Single[T]) -> T:
        """Run ``single`` with this client's credentials and transport."""
        return await single.execute(self.credentials, self.transport)

    def pages(
        self,
        paginated: Paginated[T, C],
        *,
        state: PagerState[C] | None = None,
        max_pages: int | None = None,
    ) -> CursorPager[T, C]:
        """Pager over ``paginated`` with this client's credentials and transport."""
        return paginated.pages(
            self.credentials, self.transport, state=state, max_pages=max_pages
        )

    async def fetch(self, endpoint_id: str, *path: str, **params: Any) -> Any:
        """Run a registered single-page endpoint by id.

        Args:
            endpoint_id: Registry identifier (e.g. "user_info")
            *path: Route group segments the endpoint path is relative to
            **params: Parameters passed to the spec builders

        Raises:
            EndpointError: If ``endpoint_id`` is not registered
        """
        spec, adapter = require_endpoint(endpoint_id)
        base = self.config.request(*path)
        if spec.paginated:
            return await self.execute(paginated_endpoint(spec, adapter, base, params).first())
        return await self.execute(single_endpoint(spec, adapter, base, params))

    async def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_transport and isinstance(self.transport, RESTTransport):
            await self.transport.close()
            logger.debug("client_closed", extra={"user": self.credentials.identifier})

    async def __aenter__(self) -> APIClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def __repr__(self) -> str:
        return f"APIClient(credentials={self.credentials})"
