"""Safe-navigation wrapper over parsed JSON responses.

Architecture:
    The vendor API returns loosely shaped JSON: identifiers arrive as
    numbers or strings, fields disappear between app versions, and nested
    objects are sometimes ``null``. ResponseView wraps the parsed tree and
    lets callers navigate it without guarding every step:

        view["inbox"]["threads"][0]["thread_id"].string()

    Navigation is total: a missing key, an out-of-range index or a type
    mismatch yields a null view, and every terminal extractor returns
    ``None`` instead of raising. Deciding whether a field was required is
    left to the caller.

Design Decisions:
    - Keys are tried verbatim, then in snake_case, so models can use the
      camelCase names the vendor apps use (``fullName`` -> ``full_name``)
    - The view records the path walked so far for logging and reprs
    - Only ``from_bytes`` can fail, with DecodeError for invalid JSON
"""

from __future__ import annotations

import json
import math
import re
from typing import Any

from yarl import URL

from .exceptions import DecodeError

__all__ = ["ResponseView", "snake_case"]

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")
_MISSING = object()

PathElement = str | int


def snake_case(key: str) -> str:
    """Convert ``camelCase`` keys to the ``snake_case`` used on the wire."""
    return _CAMEL_BOUNDARY.sub("_", key).lower()


class ResponseView:
    """Lazy, dynamically navigable view over a JSON value.

    Args:
        value: Parsed JSON value (dict, list, str, int, float, bool or None)
        path: Keys and indices walked to reach this value
    """

    __slots__ = ("_value", "_path")

    def __init__(self, value: Any = None, path: tuple[PathElement, ...] = ()) -> None:
        if isinstance(value, ResponseView):
            path = value.path + path
            value = value.value
        self._value = value
        self._path = path

    @classmethod
    def from_bytes(cls, data: bytes | str) -> ResponseView:
        """Parse a raw response body.

        Raises:
            DecodeError: If ``data`` is not valid JSON
        """
        try:
            return cls(json.loads(data))
        except (TypeError, ValueError, RecursionError) as exc:
            payload = data.encode() if isinstance(data, str) else data
            raise DecodeError(f"Invalid JSON response: {exc}", payload=payload) from exc

    # --- Navigation ----------------------------------------------------------

    @property
    def value(self) -> Any:
        """The underlying JSON value."""
        return self._value

    @property
    def path(self) -> tuple[PathElement, ...]:
        """Keys and indices walked to reach this view."""
        return self._path

    @property
    def is_null(self) -> bool:
        """Whether the view holds JSON ``null`` or an absent value."""
        return self._value is None

    def __getitem__(self, key: PathElement) -> ResponseView:
        return ResponseView(self._child(key), self._path + (key,))

    def get(self, *path: PathElement) -> ResponseView:
        """Navigate several keys or indices at once."""
        view = self
        for key in path:
            view = view[key]
        return view

    def _child(self, key: PathElement) -> Any:
        value = self._value
        if isinstance(key, bool):
            return None
        if isinstance(key, int):
            if isinstance(value, list) and 0 <= key < len(value):
                return value[key]
            return None
        if isinstance(value, dict):
            found = value.get(key, _MISSING)
            if found is _MISSING:
                found = value.get(snake_case(key), None)
            return found
        return None

    # --- Terminal extractors -------------------------------------------------

    def string(self) -> str | None:
        """The value as a string, or ``None``."""
        return self._value if isinstance(self._value, str) else None

    def int(self) -> int | None:
        """The value as an integer.

        Accepts JSON integers, integral floats and numeric strings, since
        identifiers come back as either.
        """
        value = self._value
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            return value
        if isinstance(value, float):
            return int(value) if math.isfinite(value) and value.is_integer() else None
        if isinstance(value, str):
            text = value.strip()
            try:
                return int(text)
            except ValueError:
                return None
        return None

    def double(self) -> float | None:
        """The value as a float (numbers and numeric strings)."""
        value = self._value
        if isinstance(value, bool):
            return None
        if isinstance(value, (int, float)):
            try:
                return float(value)
            except OverflowError:
                return None
        if isinstance(value, str):
            try:
                return float(value.strip())
            except (OverflowError, ValueError):
                return None
        return None

    def bool(self) -> bool | None:
        """The value as a boolean (JSON booleans and the integers 0/1)."""
        value = self._value
        if isinstance(value, bool):
            return value
        if isinstance(value, int) and value in (0, 1):
            return bool(value)
        return None

    def url(self) -> URL | None:
        """The value as an absolute URL, or ``None`` if it does not parse."""
        text = self.string()
        if not text:
            return None
        try:
            url = URL(text)
        except (TypeError, ValueError):
            return None
        if not url.is_absolute() or not url.scheme:
            return None
        return url

    def array(self) -> list[ResponseView] | None:
        """The value as a list of child views."""
        if not isinstance(self._value, list):
            return None
        return [ResponseView(item, self._path + (index,)) for index, item in enumerate(self._value)]

    def dictionary(self) -> dict[str, ResponseView] | None:
        """The value as a mapping of child views."""
        if not isinstance(self._value, dict):
            return None
        return {
            str(key): ResponseView(item, self._path + (str(key),))
            for key, item in self._value.items()
        }

    # --- Dunder helpers ------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ResponseView):
            return self._value == other._value
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        location = ".".join(str(key) for key in self._path) or "<root>"
        return f"ResponseView({location}={self._value!r})"
