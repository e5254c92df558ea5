"""Generic status response."""

from __future__ import annotations

from .base import StatusModel


class Status(StatusModel):
    """Plain ``{"status": ..., "message": ...}`` envelope returned by write routes."""

    __slots__ = ()

    _repr_fields = ("status", "message")

    @property
    def message(self) -> str | None:
        return self["message"].string()
