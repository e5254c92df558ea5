"""Direct thread (single conversation) endpoint definition and adapter."""

from __future__ import annotations

from typing import Any

from gramkit.api.core.config import DEFAULT_PAGE_LIMIT
from gramkit.api.core.response import ResponseView
from gramkit.api.models import ConversationUnit
from gramkit.api.runtime.rest import ResponseAdapter, RestEndpointSpec


def build_path(params: dict[str, Any]) -> str:
    return f"threads/{params['conversation']}/"


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    """Build query parameters for thread message pages."""
    cursor = params.get("cursor")
    return {
        "visual_message_return_type": "unseen",
        "direction": "older" if cursor else None,
        "cursor": cursor,
        "limit": params.get("limit", DEFAULT_PAGE_LIMIT),
    }


SPEC = RestEndpointSpec(
    id="direct_thread",
    method="GET",
    build_path=build_path,
    build_query=build_query,
    paginated=True,
)


class Adapter(ResponseAdapter):
    def parse(self, response: ResponseView, params: dict[str, Any]) -> ConversationUnit:
        return ConversationUnit(response)
