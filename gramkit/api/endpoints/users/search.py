"""User search endpoint definition and adapter.

Search pages are ranked: every page of one query must echo the same
``rank_token`` so the server keeps its ordering stable.
"""

from __future__ import annotations

from typing import Any

from gramkit.api.core.response import ResponseView
from gramkit.api.models import UserCollection
from gramkit.api.runtime.rest import ResponseAdapter, RestEndpointSpec


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    """Build query parameters for user search pages."""
    return {
        "q": params["query"],
        "max_id": params.get("cursor"),
        "rank_token": params["rank_token"],
    }


SPEC = RestEndpointSpec(
    id="user_search",
    method="GET",
    build_path=lambda _params: "search/",
    build_query=build_query,
    paginated=True,
    ranked=True,
)


class Adapter(ResponseAdapter):
    def parse(self, response: ResponseView, params: dict[str, Any]) -> UserCollection:
        return UserCollection(response)
