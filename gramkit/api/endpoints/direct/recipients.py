"""Ranked recipients endpoint definition and adapter."""

from __future__ import annotations

from typing import Any

from gramkit.api.core.response import ResponseView
from gramkit.api.models import RecipientCollection
from gramkit.api.runtime.rest import ResponseAdapter, RestEndpointSpec


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    return {
        "mode": "raven",
        "query": params.get("query"),
        "show_threads": "true",
    }


SPEC = RestEndpointSpec(
    id="direct_recipients",
    method="GET",
    build_path=lambda _params: "ranked_recipients/",
    build_query=build_query,
)


class Adapter(ResponseAdapter):
    def parse(self, response: ResponseView, params: dict[str, Any]) -> RecipientCollection:
        return RecipientCollection(response)
