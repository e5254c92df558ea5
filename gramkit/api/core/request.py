"""Immutable request description.

Architecture:
    RequestSpec is the value every endpoint builds before anything touches
    the network. It holds method, path segments, headers, query and body
    fragments, and every ``appending_*`` call returns a new value so a base
    request can be shared by many endpoints without copying.

Design Decisions:
    - Frozen dataclass with read-only mapping views
    - Last write wins for every mapping
    - ``None`` values are dropped instead of serialized, so a first page
      never sends ``cursor=None``
    - No URL validation: malformed paths fail inside the transport
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any
from urllib.parse import urlencode

__all__ = ["RequestSpec"]


def _merge(
    current: Mapping[str, Any],
    key_or_mapping: str | Mapping[str, Any] | None,
    value: Any = None,
) -> dict[str, Any]:
    """Merge fragments into a copy of ``current``, dropping ``None`` values."""
    if key_or_mapping is None:
        return dict(current)
    if isinstance(key_or_mapping, str):
        updates: Mapping[str, Any] = {key_or_mapping: value}
    else:
        updates = key_or_mapping

    merged = dict(current)
    for key, item in updates.items():
        if item is None:
            # A nil written over an existing key removes it
            merged.pop(key, None)
        else:
            merged[key] = str(item)
    return merged


def _split_segment(segment: str) -> list[str]:
    parts = [part for part in str(segment).split("/") if part]
    if str(segment).endswith("/") and parts:
        parts[-1] = f"{parts[-1]}/"
    return parts


@dataclass(frozen=True)
class RequestSpec:
    """Immutable HTTP request description.

    Attributes:
        path: Path segments, joined with ``/`` when the request is built
        method: Explicit HTTP method, or ``None`` to infer it from the body
        headers: Header fields (last write wins)
        query: Query parameters (``None`` values are never stored)
        body: Form body fields

    Example:
        >>> base = RequestSpec(path=("api", "v1", "direct_v2"))
        >>> request = base.appending_path("inbox/").appending_query(
        ...     {"cursor": None, "limit": "20"}
        ... )
        >>> request.encoded_query()
        'limit=20'
    """

    path: tuple[str, ...] = ()
    method: str | None = None
    headers: Mapping[str, str] = field(default_factory=dict)
    query: Mapping[str, str] = field(default_factory=dict)
    body: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", tuple(self.path))
        object.__setattr__(self, "headers", MappingProxyType(_merge({}, dict(self.headers))))
        object.__setattr__(self, "query", MappingProxyType(_merge({}, dict(self.query))))
        object.__setattr__(self, "body", MappingProxyType(_merge({}, dict(self.body))))

    # --- Composition ---------------------------------------------------------

    def appending_path(self, *segments: str) -> RequestSpec:
        """Append path segments, collapsing redundant separators.

        A trailing slash on a segment is kept, since the vendor routes are
        slash-terminated (``inbox/``).
        """
        parts = list(self.path)
        for segment in segments:
            pieces = _split_segment(segment)
            if not pieces:
                # A bare "/" only terminates the previous segment
                if parts and not parts[-1].endswith("/"):
                    parts[-1] = f"{parts[-1]}/"
                continue
            if parts and parts[-1].endswith("/"):
                parts[-1] = parts[-1].rstrip("/")
            parts.extend(pieces)
        return self._replace(path=tuple(parts))

    def appending_header(
        self, key_or_mapping: str | Mapping[str, str | None] | None, value: str | None = None
    ) -> RequestSpec:
        """Return a copy with header fields merged in."""
        return self._replace(headers=_merge(self.headers, key_or_mapping, value))

    def appending_query(
        self, key_or_mapping: str | Mapping[str, Any] | None, value: Any = None
    ) -> RequestSpec:
        """Return a copy with query parameters merged in.

        ``None`` values are omitted entirely rather than sent as empty strings.
        """
        return self._replace(query=_merge(self.query, key_or_mapping, value))

    def appending_body(
        self, key_or_mapping: str | Mapping[str, Any] | None, value: Any = None
    ) -> RequestSpec:
        """Return a copy with body fields merged in."""
        return self._replace(body=_merge(self.body, key_or_mapping, value))

    def with_method(self, method: str | None) -> RequestSpec:
        """Return a copy with an explicit HTTP method."""
        return self._replace(method=method.upper() if method else None)

    # --- Rendering -----------------------------------------------------------

    @property
    def resolved_method(self) -> str:
        """Explicit method, else ``POST`` when a body is present, else ``GET``."""
        if self.method:
            return self.method.upper()
        return "POST" if self.body else "GET"

    @property
    def path_string(self) -> str:
        """Path segments joined into a relative path."""
        return "/".join(self.path)

    def encoded_query(self) -> str:
        """Query parameters as an ``application/x-www-form-urlencoded`` string."""
        return urlencode(list(self.query.items()))

    def url(self, base_url: str) -> str:
        """Absolute URL for ``base_url`` (query string included)."""
        url = f"{base_url.rstrip('/')}/{self.path_string}"
        query = self.encoded_query()
        return f"{url}?{query}" if query else url

    def _replace(self, **changes: Any) -> RequestSpec:
        values: dict[str, Any] = {
            "path": self.path,
            "method": self.method,
            "headers": self.headers,
            "query": self.query,
            "body": self.body,
        }
        values.update(changes)
        return RequestSpec(**values)

    def __repr__(self) -> str:
        # Header values carry session cookies; only their names are shown
        return (
            f"RequestSpec(method={self.resolved_method!r}, path={self.path_string!r}, "
            f"headers={sorted(self.headers)!r}, query={dict(self.query)!r}, "
            f"body={sorted(self.body)!r})"
        )
