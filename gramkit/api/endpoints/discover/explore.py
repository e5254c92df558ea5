"""Explore feed endpoint definitions and adapter.

Two surfaces share the FeedPage shape: the plain ``discover/explore/``
grid and the ``discover/topical_explore/`` sectional feed.
"""

from __future__ import annotations

from typing import Any

from gramkit.api.core.response import ResponseView
from gramkit.api.models import FeedPage
from gramkit.api.runtime.rest import ResponseAdapter, RestEndpointSpec


def build_explore_query(params: dict[str, Any]) -> dict[str, Any]:
    return {"max_id": params.get("cursor")}


EXPLORE_SPEC = RestEndpointSpec(
    id="discover_explore",
    method="GET",
    build_path=lambda _params: "explore/",
    build_query=build_explore_query,
    paginated=True,
)


def build_topics_query(params: dict[str, Any]) -> dict[str, Any]:
    """Build query parameters for the sectional explore feed."""
    return {
        "is_prefetch": "true",
        "omit_cover_media": "false",
        "use_sectional_payload": "true",
        "timezone_offset": "43200",
        "include_fixed_destinations": "false",
        "max_id": params.get("cursor"),
    }


TOPICS_SPEC = RestEndpointSpec(
    id="discover_topics",
    method="GET",
    build_path=lambda _params: "topical_explore/",
    build_query=build_topics_query,
    session_query=(("session_id", "sessionid"),),
    paginated=True,
)


class Adapter(ResponseAdapter):
    def parse(self, response: ResponseView, params: dict[str, Any]) -> FeedPage:
        return FeedPage(response)
