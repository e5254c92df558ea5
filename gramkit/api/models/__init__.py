"""Typed response models.

Architecture:
    Every model is a read-only projection over a ResponseView. Properties
    navigate the wrapped JSON on each access and return ``None`` for missing
    or mistyped fields, so models never fail to construct.

Model Categories:
    - Profiles: User, UserUnit, UserCollection, Counter, Access
    - Relationships: Friendship, FriendshipCollection
    - Direct: Conversation, ConversationUnit, ConversationCollection, Message,
      Recipient, RecipientCollection
    - Misc: Status, FeedPage
"""

from .base import ResponseModel, StatusModel
from .conversation import Conversation, ConversationCollection, ConversationUnit, Message
from .feed import FeedPage
from .friendship import Friendship, FriendshipCollection
from .recipient import Recipient, RecipientCollection
from .status import Status
from .user import Access, Counter, User, UserCollection, UserUnit

__all__ = [
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
    "StatusModel",
    "User",
    "UserCollection",
    "UserUnit",
]
