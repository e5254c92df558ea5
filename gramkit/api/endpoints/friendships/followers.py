"""Follower and following list endpoint definitions and adapter.

Both lists are ranked: the server expects the same ``rank_token`` on
every page of one traversal.
"""

from __future__ import annotations

from typing import Any

from gramkit.api.core.response import ResponseView
from gramkit.api.models import UserCollection
from gramkit.api.runtime.rest import ResponseAdapter, RestEndpointSpec


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    return {
        "max_id": params.get("cursor"),
        "rank_token": params["rank_token"],
    }


FOLLOWERS_SPEC = RestEndpointSpec(
    id="friendship_followers",
    method="GET",
    build_path=lambda params: f"{params['user']}/followers/",
    build_query=build_query,
    paginated=True,
    ranked=True,
)

FOLLOWING_SPEC = RestEndpointSpec(
    id="friendship_following",
    method="GET",
    build_path=lambda params: f"{params['user']}/following/",
    build_query=build_query,
    paginated=True,
    ranked=True,
)


class Adapter(ResponseAdapter):
    def parse(self, response: ResponseView, params: dict[str, Any]) -> UserCollection:
        return UserCollection(response)
