"""Direct inbox endpoint definitions and adapter.

The same query shape serves the main inbox and the pending (requests)
inbox; only the path differs.
"""

from __future__ import annotations

from typing import Any

from gramkit.api.core.config import DEFAULT_PAGE_LIMIT
from gramkit.api.core.response import ResponseView
from gramkit.api.models import ConversationCollection
from gramkit.api.runtime.rest import ResponseAdapter, RestEndpointSpec


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    """Build query parameters for inbox pages."""
    cursor = params.get("cursor")
    return {
        "visual_message_return_type": "unseen",
        # Only older pages carry a direction
        "direction": "older" if cursor else None,
        "cursor": cursor,
        "thread_message_limit": params.get("thread_message_limit", 10),
        "persistent_badging": "true",
        "limit": params.get("limit", DEFAULT_PAGE_LIMIT),
    }


INBOX_SPEC = RestEndpointSpec(
    id="direct_inbox",
    method="GET",
    build_path=lambda _params: "inbox/",
    build_query=build_query,
    paginated=True,
)

PENDING_INBOX_SPEC = RestEndpointSpec(
    id="direct_pending_inbox",
    method="GET",
    build_path=lambda _params: "pending_inbox/",
    build_query=build_query,
    paginated=True,
)


class Adapter(ResponseAdapter):
    """Adapter wrapping inbox pages into ConversationCollection."""

    def parse(self, response: ResponseView, params: dict[str, Any]) -> ConversationCollection:
        return ConversationCollection(response)
