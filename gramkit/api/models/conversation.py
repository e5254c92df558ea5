"""Direct messaging models."""

from __future__ import annotations

from datetime import datetime

from yarl import URL

from ..core.response import ResponseView
from .base import ResponseModel, StatusModel, identifier, timestamp
from .user import User


def _older_cursor(view: ResponseView) -> str | None:
    # Threads report ``oldest_cursor`` even on the last page; ``has_older`` decides
    if view["hasOlder"].bool() is False:
        return None
    return view["oldestCursor"].string()


class Message(ResponseModel):
    """A single item in a conversation."""

    __slots__ = ()

    _repr_fields = ("identifier", "user_identifier", "sent_at", "kind", "text")

    @property
    def identifier(self) -> str | None:
        return identifier(self["itemId"])

    @property
    def user_identifier(self) -> str | None:
        return identifier(self["userId"])

    @property
    def sent_at(self) -> datetime | None:
        return timestamp(self["timestamp"])

    @property
    def kind(self) -> str | None:
        return self["itemType"].string()

    @property
    def text(self) -> str | None:
        return self["text"].string() or self["link"]["text"].string()

    @property
    def links(self) -> list[URL]:
        url = self["link"]["linkContext"]["linkUrl"].url()
        return [url] if url is not None else []


class Conversation(ResponseModel):
    """A direct thread."""

    __slots__ = ()

    _repr_fields = ("identifier", "title", "updated_at", "is_muted", "participants", "messages")

    @property
    def identifier(self) -> str | None:
        return identifier(self["threadId"])

    @property
    def title(self) -> str | None:
        return self["threadTitle"].string()

    @property
    def updated_at(self) -> datetime | None:
        return timestamp(self["lastActivityAt"])

    @property
    def is_muted(self) -> bool | None:
        return self["muted"].bool()

    @property
    def is_group(self) -> bool | None:
        return self["isGroup"].bool()

    @property
    def participants(self) -> list[User] | None:
        views = self["users"].array()
        return [User(view) for view in views] if views is not None else None

    @property
    def messages(self) -> list[Message] | None:
        views = self["items"].array()
        return [Message(view) for view in views] if views is not None else None


class ConversationUnit(StatusModel):
    """One page of a single thread's messages."""

    __slots__ = ()

    _repr_fields = ("conversation", "status")

    @property
    def conversation(self) -> Conversation | None:
        view = self["thread"]
        return Conversation(view) if view.dictionary() is not None else None

    @property
    def next_cursor(self) -> str | None:
        return _older_cursor(self["thread"])

    def __len__(self) -> int:
        conversation = self.conversation
        return len(conversation.messages or []) if conversation is not None else 0


class ConversationCollection(StatusModel):
    """One page of the inbox."""

    __slots__ = ()

    _repr_fields = ("conversations", "viewer", "status")

    @property
    def conversations(self) -> list[Conversation] | None:
        views = self["inbox"]["threads"].array()
        return [Conversation(view) for view in views] if views is not None else None

    @property
    def viewer(self) -> User | None:
        view = self["viewer"]
        return User(view) if view.dictionary() is not None else None

    @property
    def unseen_count(self) -> int | None:
        return self["inbox"]["unseenCount"].int()

    @property
    def pending_requests(self) -> int | None:
        return self["pendingRequestsTotal"].int()

    @property
    def next_cursor(self) -> str | None:
        return _older_cursor(self["inbox"])

    def __len__(self) -> int:
        return len(self.conversations or [])
