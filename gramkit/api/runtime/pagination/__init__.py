"""Cursor pagination layer.

Architecture:
    - definitions.py: Page, RankedCursor and PagerState values
    - pager.py: CursorPager and RankedPager async iterators
    - telemetry.py: Structured logging

Usage:
    Endpoint facades build a fetch function per cursor and wrap it in a
    pager; consumers iterate the pager and stop whenever they like.
"""

from __future__ import annotations

from .definitions import (
    Page,
    PagerState,
    RankedCursor,
    generate_rank_token,
    is_terminal_cursor,
)
from .pager import CursorPager, RankedPager

__all__ = [
    "Page",
    "PagerState",
    "RankedCursor",
    "CursorPager",
    "RankedPager",
    "generate_rank_token",
    "is_terminal_cursor",
]
