"""Loosely typed feed pages."""

from __future__ import annotations

from ..core.response import ResponseView
from .base import StatusModel, identifier


class FeedPage(StatusModel):
    """One page of a discovery feed.

    Feed items vary too much between surfaces to model individually, so
    they are exposed as views.
    """

    __slots__ = ()

    _repr_fields = ("next_cursor", "more_available", "status")

    @property
    def items(self) -> list[ResponseView]:
        views = self["items"].array()
        if views is None:
            views = self["sectionalItems"].array()
        return views or []

    @property
    def more_available(self) -> bool | None:
        return self["moreAvailable"].bool()

    @property
    def next_cursor(self) -> str | None:
        if self.more_available is False:
            return None
        return identifier(self["nextMaxId"])

    def __len__(self) -> int:
        return len(self.items)
