"""Friendship status endpoint definitions and adapters."""

from __future__ import annotations

from typing import Any

from gramkit.api.core.response import ResponseView
from gramkit.api.models import Friendship, FriendshipCollection
from gramkit.api.runtime.rest import ResponseAdapter, RestEndpointSpec


def build_show_path(params: dict[str, Any]) -> str:
    return f"show/{params['user']}/"


SHOW_SPEC = RestEndpointSpec(
    id="friendship_show",
    method="GET",
    build_path=build_show_path,
)


def build_show_many_body(params: dict[str, Any]) -> dict[str, Any]:
    return {"user_ids": ",".join(params["users"])}


SHOW_MANY_SPEC = RestEndpointSpec(
    id="friendship_show_many",
    method="POST",
    build_path=lambda _params: "show_many/",
    build_body=build_show_many_body,
    session_body=("_csrftoken", "_uuid"),
)


class ShowAdapter(ResponseAdapter):
    def parse(self, response: ResponseView, params: dict[str, Any]) -> Friendship:
        return Friendship(response)


class ShowManyAdapter(ResponseAdapter):
    def parse(self, response: ResponseView, params: dict[str, Any]) -> FriendshipCollection:
        return FriendshipCollection(response)
