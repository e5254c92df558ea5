"""Endpoint facades.

Architecture:
    An endpoint facade is a deferred description of one API operation.
    Creating one performs no I/O; it is materialized only when executed
    with credentials and a transport:

        summary = users.summary("25025320")          # Single[UserUnit]
        unit = await summary.execute(credentials, transport)

        search = users.search("sunset")               # Paginated[UserCollection, RankedCursor]
        async for collection in search.pages(credentials, transport):
            ...

    Single wraps ``(Credentials, Transport) -> Awaitable[T]``. Paginated
    wraps a factory producing a CursorPager for a given state. The
    ``single_endpoint`` and ``paginated_endpoint`` helpers build both from
    a RestEndpointSpec and its ResponseAdapter.

See Also:
    - RestRunner: builds and executes the RequestSpec for one call
    - CursorPager / RankedPager: drive the per-cursor fetches
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from typing import Any, Generic, Protocol, TypeVar

from ..core.credentials import Credentials
from ..core.request import RequestSpec
from .pagination import CursorPager, Page, PagerState, RankedCursor, RankedPager
from .rest import ResponseAdapter, RestEndpointSpec, RestRunner, Transport

T = TypeVar("T")
U = TypeVar("U")
C = TypeVar("C")

__all__ = ["Single", "Paginated", "single_endpoint", "paginated_endpoint"]


class PagerFactory(Protocol[T, C]):
    def __call__(
        self,
        credentials: Credentials,
        transport: Transport,
        state: PagerState[C] | None,
        max_pages: int | None,
    ) -> CursorPager[T, C]: ...


class Single(Generic[T]):
    """Deferred single-result operation."""

    def __init__(
        self,
        operation: Callable[[Credentials, Transport], Awaitable[T]],
        *,
        endpoint_id: str = "unknown",
    ) -> None:
        self._operation = operation
        self.endpoint_id = endpoint_id

    async def execute(self, credentials: Credentials, transport: Transport) -> T:
        """Run the operation once.

        Raises:
            TransportError: If the transport fails
            DecodeError: If the response is not valid JSON
        """
        return await self._operation(credentials, transport)

    def map(self, transform: Callable[[T], U]) -> Single[U]:
        """Single applying ``transform`` to the result."""

        async def operation(credentials: Credentials, transport: Transport) -> U:
            return transform(await self._operation(credentials, transport))

        return Single(operation, endpoint_id=self.endpoint_id)

    def __repr__(self) -> str:
        return f"Single({self.endpoint_id!r})"


class Paginated(Generic[T, C]):
    """Deferred cursor-paginated operation."""

    def __init__(self, factory: PagerFactory[T, C], *, endpoint_id: str = "unknown") -> None:
        self._factory = factory
        self.endpoint_id = endpoint_id

    def pages(
        self,
        credentials: Credentials,
        transport: Transport,
        *,
        state: PagerState[C] | None = None,
        max_pages: int | None = None,
    ) -> CursorPager[T, C]:
        """Pager over the endpoint's pages.

        Args:
            credentials: Session credentials
            transport: Transport executing each page request
            state: Starting state (None starts from the first page)
            max_pages: Optional bound on the number of fetches
        """
        return self._factory(credentials, transport, state, max_pages)

    def first(self) -> Single[T]:
        """Single fetching only the first page."""

        async def operation(credentials: Credentials, transport: Transport) -> T:
            return await self.pages(credentials, transport, max_pages=1).first()

        return Single(operation, endpoint_id=self.endpoint_id)

    def __repr__(self) -> str:
        return f"Paginated({self.endpoint_id!r})"


def single_endpoint(
    spec: RestEndpointSpec,
    adapter: ResponseAdapter,
    base: RequestSpec,
    params: Mapping[str, Any] | None = None,
) -> Single[Any]:
    """Single facade for a registered endpoint."""
    bound = dict(params or {})

    async def operation(credentials: Credentials, transport: Transport) -> Any:
        return await RestRunner(transport).run(
            spec=spec, adapter=adapter, base=base, credentials=credentials, params=bound
        )

    return Single(operation, endpoint_id=spec.id)


def _cursor_params(cursor: str | RankedCursor | None) -> dict[str, Any]:
    if isinstance(cursor, RankedCursor):
        return {"cursor": cursor.cursor, "rank_token": cursor.rank}
    return {"cursor": cursor}


def paginated_endpoint(
    spec: RestEndpointSpec,
    adapter: ResponseAdapter,
    base: RequestSpec,
    params: Mapping[str, Any] | None = None,
) -> Paginated[Any, Any]:
    """Paginated facade for a registered endpoint.

    The cursor is passed to the spec builders as ``params["cursor"]``;
    ranked specs also receive ``params["rank_token"]``.
    """
    bound = dict(params or {})

    def factory(
        credentials: Credentials,
        transport: Transport,
        state: PagerState[Any] | None,
        max_pages: int | None,
    ) -> CursorPager[Any, Any]:
        runner = RestRunner(transport)

        async def fetch(cursor: str | RankedCursor | None) -> Page[Any]:
            page_params = {**bound, **_cursor_params(cursor)}
            parsed = await runner.run(
                spec=spec,
                adapter=adapter,
                base=base,
                credentials=credentials,
                params=page_params,
            )
            return Page(items=parsed, next_cursor=adapter.next_cursor(parsed))

        if spec.ranked:
            return RankedPager(fetch, state=state, max_pages=max_pages, endpoint_id=spec.id)
        return CursorPager(fetch, state=state, max_pages=max_pages, endpoint_id=spec.id)

    return Paginated(factory, endpoint_id=spec.id)
