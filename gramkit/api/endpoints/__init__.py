"""Endpoint registry.

This module collects every endpoint specification and adapter from the
route groups and exposes lookup by endpoint id.
"""

from __future__ import annotations

from gramkit.api.core.exceptions import EndpointError
from gramkit.api.runtime.rest import ResponseAdapter, RestEndpointSpec

from .direct import ConversationEndpoints, Direct
from .direct import actions as direct_actions
from .direct import inbox as direct_inbox
from .direct import presence as direct_presence
from .direct import recipients as direct_recipients
from .direct import thread as direct_thread
from .discover import Discover
from .discover import chaining as discover_chaining
from .discover import explore as discover_explore
from .friendships import Friendships
from .friendships import followers as friendship_followers
from .friendships import show as friendship_show
from .users import Users
from .users import blocked as user_blocked
from .users import info as user_info
from .users import search as user_search

# Registry mapping endpoint IDs to specs and adapters
_ENDPOINT_REGISTRY: dict[str, tuple[RestEndpointSpec, type[ResponseAdapter]]] = {
    spec.id: (spec, adapter)
    for spec, adapter in (
        (direct_inbox.INBOX_SPEC, direct_inbox.Adapter),
        (direct_inbox.PENDING_INBOX_SPEC, direct_inbox.Adapter),
        (direct_thread.SPEC, direct_thread.Adapter),
        (direct_recipients.SPEC, direct_recipients.Adapter),
        (direct_presence.SPEC, direct_presence.Adapter),
        (direct_actions.EDIT_SPEC, direct_actions.EditAdapter),
        (direct_actions.SEND_SPEC, direct_actions.SendAdapter),
        (user_info.SPEC, user_info.Adapter),
        (user_search.SPEC, user_search.Adapter),
        (user_blocked.SPEC, user_blocked.Adapter),
        (discover_chaining.SPEC, discover_chaining.Adapter),
        (discover_explore.EXPLORE_SPEC, discover_explore.Adapter),
        (discover_explore.TOPICS_SPEC, discover_explore.Adapter),
        (friendship_show.SHOW_SPEC, friendship_show.ShowAdapter),
        (friendship_show.SHOW_MANY_SPEC, friendship_show.ShowManyAdapter),
        (friendship_followers.FOLLOWERS_SPEC, friendship_followers.Adapter),
        (friendship_followers.FOLLOWING_SPEC, friendship_followers.Adapter),
    )
}


def get_endpoint_spec(endpoint_id: str) -> RestEndpointSpec | None:
    """Get endpoint specification by ID.

    Args:
        endpoint_id: Endpoint identifier (e.g., "direct_inbox", "user_search")

    Returns:
        RestEndpointSpec if found, None otherwise
    """
    entry = _ENDPOINT_REGISTRY.get(endpoint_id)
    return entry[0] if entry else None


def get_endpoint_adapter(endpoint_id: str) -> type[ResponseAdapter] | None:
    """Get endpoint adapter class by ID.

    Args:
        endpoint_id: Endpoint identifier (e.g., "direct_inbox", "user_search")

    Returns:
        Adapter class if found, None otherwise
    """
    entry = _ENDPOINT_REGISTRY.get(endpoint_id)
    return entry[1] if entry else None


def require_endpoint(endpoint_id: str) -> tuple[RestEndpointSpec, ResponseAdapter]:
    """Spec and adapter instance for ``endpoint_id``.

    Raises:
        EndpointError: If the endpoint is not registered
    """
    entry = _ENDPOINT_REGISTRY.get(endpoint_id)
    if entry is None:
        raise EndpointError(f"Unknown endpoint: {endpoint_id!r}")
    spec, adapter = entry
    return spec, adapter()


def list_endpoints() -> list[str]:
    """List all available endpoint IDs."""
    return list(_ENDPOINT_REGISTRY.keys())


__all__ = [
    "ConversationEndpoints",
    "Direct",
    "Discover",
    "Friendships",
    "Users",
    "get_endpoint_adapter",
    "get_endpoint_spec",
    "list_endpoints",
    "require_endpoint",
]
