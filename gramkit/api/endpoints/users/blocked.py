"""Blocked profiles endpoint definition."""

from __future__ import annotations

from gramkit.api.runtime.rest import ResponseAdapter, RestEndpointSpec

SPEC = RestEndpointSpec(
    id="user_blocked",
    method="GET",
    build_path=lambda _params: "blocked_list/",
)

Adapter = ResponseAdapter
