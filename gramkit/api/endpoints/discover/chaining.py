"""Suggested profiles endpoint definition and adapter."""

from __future__ import annotations

from typing import Any

from gramkit.api.core.response import ResponseView
from gramkit.api.models import UserCollection
from gramkit.api.runtime.rest import ResponseAdapter, RestEndpointSpec


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    return {"target_id": params["user"]}


SPEC = RestEndpointSpec(
    id="discover_chaining",
    method="GET",
    build_path=lambda _params: "chaining/",
    build_query=build_query,
)


class Adapter(ResponseAdapter):
    def parse(self, response: ResponseView, params: dict[str, Any]) -> UserCollection:
        return UserCollection(response)
