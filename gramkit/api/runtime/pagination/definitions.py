"""Pagination data structures.

This module defines the values the pager passes around: the page returned
by one fetch, the cursor types, and the immutable pager state.
"""

from __future__ import annotations

import uuid
from collections.abc import Sized
from dataclasses import dataclass, replace
from typing import Generic, TypeVar

T = TypeVar("T")
C = TypeVar("C")


def generate_rank_token() -> str:
    """Fresh rank token for a new logical query."""
    return str(uuid.uuid4())


def is_terminal_cursor(cursor: str | None) -> bool:
    """Whether ``cursor`` ends pagination (absent or empty)."""
    return cursor is None or cursor == ""


@dataclass(frozen=True)
class Page(Generic[T]):
    """Result of one page fetch.

    Attributes:
        items: Typed page content
        next_cursor: Cursor for the following page (None or "" when done)
    """

    items: T
    next_cursor: str | None = None

    @property
    def is_empty(self) -> bool:
        """Whether the page carries an empty item collection."""
        if self.items is None:
            return True
        return isinstance(self.items, Sized) and len(self.items) == 0


@dataclass(frozen=True)
class RankedCursor:
    """Cursor for search-style pagination.

    Attributes:
        rank: Token pinned for every page of one logical query
        cursor: Page cursor (None for the first page)
    """

    rank: str
    cursor: str | None = None

    def advanced(self, cursor: str | None) -> RankedCursor:
        """Same rank token, next page cursor."""
        return replace(self, cursor=cursor)


@dataclass(frozen=True)
class PagerState(Generic[C]):
    """Immutable pager state.

    Attributes:
        cursor: Cursor to request next (None for the first page). Once
            exhausted, the cursor a resumed pager would start from, if any.
        exhausted: Whether pagination has ended
        pages_fetched: Number of successful fetches so far
    """

    cursor: C | None = None
    exhausted: bool = False
    pages_fetched: int = 0

    def advanced(self, cursor: C) -> PagerState[C]:
        """Active state pointing at ``cursor`` after one more fetch."""
        return PagerState(cursor=cursor, exhausted=False, pages_fetched=self.pages_fetched + 1)

    def finished(self, cursor: C | None = None, *, fetched: bool = True) -> PagerState[C]:
        """Terminal state."""
        return PagerState(
            cursor=cursor,
            exhausted=True,
            pages_fetched=self.pages_fetched + (1 if fetched else 0),
        )

    @property
    def resumable(self) -> bool:
        """Whether the state stopped early with a cursor left to fetch."""
        return self.exhausted and self.cursor is not None

    def resumed(self) -> PagerState[C]:
        """Active state continuing from the stored cursor."""
        return PagerState(cursor=self.cursor, exhausted=False, pages_fetched=self.pages_fetched)
