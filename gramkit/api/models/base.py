"""Base class for typed response projections."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any, ClassVar

from ..core.response import PathElement, ResponseView


def identifier(view: ResponseView) -> str | None:
    """Identifier that may arrive as a JSON string or number."""
    text = view.string()
    if text is not None:
        return text
    number = view.int()
    return str(number) if number is not None else None


def timestamp(view: ResponseView) -> datetime | None:
    """Datetime from a vendor timestamp in seconds, milliseconds or microseconds."""
    value = view.int()
    if value is None:
        return None
    try:
        if value > 10**14:
            seconds = value / 1_000_000
        elif value > 10**11:
            seconds = value / 1_000
        else:
            seconds = float(value)
        return datetime.fromtimestamp(seconds, tz=UTC)
    except (OverflowError, OSError, ValueError):
        return None


class ResponseModel:
    """Read-only projection over a ResponseView.

    Subclasses expose properties that re-navigate the wrapped view on every
    access; nothing is cached, so a model always reflects the tree it wraps.
    """

    __slots__ = ("_response",)

    # Properties shown by repr()
    _repr_fields: ClassVar[tuple[str, ...]] = ()

    def __init__(self, response: ResponseView | Any = None) -> None:
        self._response = response if isinstance(response, ResponseView) else ResponseView(response)

    @property
    def response(self) -> ResponseView:
        """The wrapped view."""
        return self._response

    def __getitem__(self, key: PathElement) -> ResponseView:
        return self._response[key]

    def __eq__(self, other: object) -> bool:
        if type(other) is type(self):
            return self._response == other._response  # type: ignore[attr-defined]
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={getattr(self, name)!r}" for name in self._repr_fields)
        return f"{type(self).__name__}({fields})"


class StatusModel(ResponseModel):
    """Response model carrying the vendor ``status`` envelope field."""

    __slots__ = ()

    @property
    def status(self) -> str | None:
        return self["status"].string()

    @property
    def is_ok(self) -> bool:
        return self.status == "ok"
