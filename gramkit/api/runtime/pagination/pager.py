"""Cursor pagination engine.

This module provides CursorPager, which turns "fetch one page given a
cursor" into a lazy async sequence of pages, and RankedPager, which pins a
rank token across every page of one search.

State machine:
    Active(cursor) --fetch ok, usable next cursor--> Active(next)
    Active(cursor) --fetch ok, no/empty/repeated cursor or empty page--> Exhausted
    Active(cursor) --fetch error--> Exhausted (error re-raised)

Pages are fetched only when the consumer pulls one; there is no
prefetching, so breaking out of ``async for`` is all the cancellation a
pager needs.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from time import perf_counter
from typing import Generic, TypeVar, cast

from .definitions import (
    PagerState,
    Page,
    RankedCursor,
    generate_rank_token,
    is_terminal_cursor,
)
from .telemetry import log_page_error, log_page_fetched, log_pager_exhausted

T = TypeVar("T")
C = TypeVar("C")

__all__ = ["CursorPager", "RankedPager"]


class CursorPager(Generic[T, C]):
    """Lazy async iterator over the items of consecutive pages.

    Args:
        fetch: Async function fetching the page for a cursor (None on the first page)
        state: Initial state (defaults to the first page)
        max_pages: Optional upper bound on fetches performed by this pager
        endpoint_id: Identifier used in telemetry

    Example:
        >>> pager = CursorPager(fetch_inbox)
        >>> async for conversations in pager:
        ...     handle(conversations)
    """

    def __init__(
        self,
        fetch: Callable[[C | None], Awaitable[Page[T]]],
        *,
        state: PagerState[C] | None = None,
        max_pages: int | None = None,
        endpoint_id: str = "unknown",
    ) -> None:
        if max_pages is not None and max_pages < 1:
            raise ValueError("max_pages must be at least 1")
        self._fetch = fetch
        self._state: PagerState[C] = state if state is not None else PagerState()
        self._max_pages = max_pages
        self._endpoint_id = endpoint_id
        self._fetched = 0

    @property
    def state(self) -> PagerState[C]:
        """Current pager state."""
        return self._state

    @property
    def exhausted(self) -> bool:
        return self._state.exhausted

    def _next_cursor(self, value: str) -> C:
        return cast(C, value)

    def __aiter__(self) -> CursorPager[T, C]:
        return self

    async def __anext__(self) -> T:
        state = self._state
        if state.exhausted:
            raise StopAsyncIteration

        page_index = state.pages_fetched
        start = perf_counter()
        try:
            page = await self._fetch(state.cursor)
        except Exception as e:
            # Keep the failed cursor so the caller may resume it explicitly
            self._state = state.finished(state.cursor, fetched=False)
            log_page_error(
                endpoint_id=self._endpoint_id,
                page_index=page_index,
                error_type=type(e).__name__,
                error_message=str(e),
            )
            raise

        self._fetched += 1
        self._state = self._transition(state, page)
        log_page_fetched(
            endpoint_id=self._endpoint_id,
            page_index=page_index,
            has_next=not self._state.exhausted,
            latency_ms=(perf_counter() - start) * 1000.0,
        )
        return page.items

    def _transition(self, state: PagerState[C], page: Page[T]) -> PagerState[C]:
        value = page.next_cursor
        if is_terminal_cursor(value):
            reason = "no_cursor" if value is None else "empty_cursor"
            return self._finish(state, reason)
        if page.is_empty:
            return self._finish(state, "empty_page")

        next_cursor = self._next_cursor(cast(str, value))
        if next_cursor == state.cursor:
            return self._finish(state, "stalled_cursor")
        if self._max_pages is not None and self._fetched >= self._max_pages:
            return self._finish(state, "max_pages", cursor=next_cursor)
        return state.advanced(next_cursor)

    def _finish(
        self, state: PagerState[C], reason: str, cursor: C | None = None
    ) -> PagerState[C]:
        finished = state.finished(cursor)
        log_pager_exhausted(
            endpoint_id=self._endpoint_id,
            pages_fetched=finished.pages_fetched,
            reason=reason,
        )
        return finished

    async def first(self) -> T:
        """Fetch a single page.

        Raises:
            StopAsyncIteration: If the pager is already exhausted
        """
        return await self.__anext__()

    async def collect(self) -> list[T]:
        """Consume every remaining page into a list."""
        pages: list[T] = []
        async for items in self:
            pages.append(items)
        return pages


class RankedPager(CursorPager[T, RankedCursor]):
    """CursorPager whose cursors carry a rank token fixed for the whole query.

    The token is generated when the pager is constructed from an active
    state with no cursor, and reused from the state otherwise. Every fetch receives a
    RankedCursor with the same ``rank``.

    Raises:
        TypeError: If a resumed state carries a cursor that is not a RankedCursor
    """

    def __init__(
        self,
        fetch: Callable[[RankedCursor | None], Awaitable[Page[T]]],
        *,
        state: PagerState[RankedCursor] | None = None,
        max_pages: int | None = None,
        endpoint_id: str = "unknown",
    ) -> None:
        state = state if state is not None else PagerState()
        if state.cursor is not None and not isinstance(state.cursor, RankedCursor):
            raise TypeError(
                f"RankedPager state cursor must be a RankedCursor, got {type(state.cursor).__name__}"
            )
        if state.cursor is None and not state.exhausted:
            state = PagerState(
                cursor=RankedCursor(rank=generate_rank_token()),
                exhausted=state.exhausted,
                pages_fetched=state.pages_fetched,
            )
        super().__init__(fetch, state=state, max_pages=max_pages, endpoint_id=endpoint_id)
        self.rank = state.cursor.rank if state.cursor is not None else generate_rank_token()

    def _next_cursor(self, value: str) -> RankedCursor:
        return RankedCursor(rank=self.rank, cursor=value)
