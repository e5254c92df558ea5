"""Direct messaging endpoints."""

from .composer import ComposedMessage, compose_message, detect_links
from .group import ConversationEndpoints, Direct

__all__ = [
    "Direct",
    "ConversationEndpoints",
    "ComposedMessage",
    "compose_message",
    "detect_links",
]
