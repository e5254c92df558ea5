"""gramkit.api - typed, paginated client layer for a private photo-sharing API."""

from .clients import APIClient
from .core import (
    ClientConfig,
    ClientError,
    Credentials,
    DecodeError,
    Device,
    EndpointError,
    RateLimitError,
    RequestSpec,
    ResponseView,
    TransportError,
)
from .endpoints import (
    ConversationEndpoints,
    Direct,
    Discover,
    Friendships,
    Users,
    get_endpoint_adapter,
    get_endpoint_spec,
    list_endpoints,
)
from .endpoints.direct import ComposedMessage, compose_message, detect_links
from .models import (
    Access,
    Conversation,
    ConversationCollection,
    ConversationUnit,
    Counter,
    FeedPage,
    Friendship,
    FriendshipCollection,
    Message,
    Recipient,
    RecipientCollection,
    ResponseModel,
    Status,
    User,
    UserCollection,
    UserUnit,
)
from .runtime import (
    CursorPager,
    Page,
    Paginated,
    PagerState,
    RankedCursor,
    RankedPager,
    RESTTransport,
    Single,
    Transport,
)

__version__ = "0.1.0"

__all__ = [
    # Client
    "APIClient",
    # Core
    "ClientConfig",
    "Credentials",
    "Device",
    "RequestSpec",
    "ResponseView",
    # Exceptions
    "ClientError",
    "TransportError",
    "RateLimitError",
    "DecodeError",
    "EndpointError",
    # Runtime
    "Single",
    "Paginated",
    "CursorPager",
    "RankedPager",
    "Page",
    "PagerState",
    "RankedCursor",
    "Transport",
    "RESTTransport",
    # Route groups
    "Direct",
    "ConversationEndpoints",
    "Users",
    "Discover",
    "Friendships",
    "get_endpoint_spec",
    "get_endpoint_adapter",
    "list_endpoints",
    # Composer
    "ComposedMessage",
    "compose_message",
    "detect_links",
    # Models
    "Access",
    "Conversation",
    "ConversationCollection",
    "ConversationUnit",
    "Counter",
    "FeedPage",
    "Friendship",
    "FriendshipCollection",
    "Message",
    "Recipient",
    "RecipientCollection",
    "ResponseModel",
    "Status",
    "User",
    "UserCollection",
    "UserUnit",
    "__version__",
]
