"""Direct messaging endpoint group (``direct_v2``)."""

from __future__ import annotations

from collections.abc import Iterable

from gramkit.api.core.config import ClientConfig
from gramkit.api.core.request import RequestSpec
from gramkit.api.core.response import ResponseView
from gramkit.api.models import (
    ConversationCollection,
    ConversationUnit,
    RecipientCollection,
    Status,
)
from gramkit.api.runtime.endpoint import Paginated, Single, paginated_endpoint, single_endpoint

from . import actions, inbox, presence, recipients, thread
from .composer import compose_message, json_ids


class Direct:
    """Inbox, recipients and per-conversation endpoints. Requires authentication."""

    def __init__(self, config: ClientConfig | None = None) -> None:
        self.config = config or ClientConfig()
        self._base = self.config.request("direct_v2")

    @property
    def inbox(self) -> Paginated[ConversationCollection, str]:
        """Paginate all threads."""
        return paginated_endpoint(inbox.INBOX_SPEC, inbox.Adapter(), self._base)

    @property
    def pending_inbox(self) -> Paginated[ConversationCollection, str]:
        """Paginate message requests."""
        return paginated_endpoint(inbox.PENDING_INBOX_SPEC, inbox.Adapter(), self._base)

    def recipients(self, query: str | None = None) -> Single[RecipientCollection]:
        """Top ranked recipients, optionally matching ``query``."""
        return single_endpoint(
            recipients.SPEC, recipients.Adapter(), self._base, {"query": query}
        )

    @property
    def presence(self) -> Single[ResponseView]:
        return single_endpoint(presence.SPEC, presence.Adapter(), self._base)

    def conversation(self, identifier: str) -> ConversationEndpoints:
        """Endpoints scoped to the thread matching ``identifier``."""
        return ConversationEndpoints(identifier, base=self._base)


class ConversationEndpoints:
    """Endpoints for a single direct thread."""

    def __init__(self, identifier: str, *, base: RequestSpec) -> None:
        if not identifier:
            raise ValueError("Conversation identifier must be a non-empty string")
        self.identifier = identifier
        self._base = base

    @property
    def messages(self) -> Paginated[ConversationUnit, str]:
        """Paginate the messages in the conversation, newest first."""
        return paginated_endpoint(
            thread.SPEC, thread.Adapter(), self._base, {"conversation": self.identifier}
        )

    @property
    def summary(self) -> Single[ConversationUnit]:
        """The conversation with its most recent page of messages."""
        return self.messages.first()

    def _edit(self, action: str, body: dict[str, str] | None = None) -> Single[Status]:
        return single_endpoint(
            actions.EDIT_SPEC,
            actions.EditAdapter(),
            self._base,
            {"conversation": self.identifier, "action": action, "body": body or {}},
        )

    def delete(self) -> Single[Status]:
        """Hide the conversation from the inbox."""
        return self._edit("hide/", {"use_unified_inbox": "true"})

    def invite(self, user_identifiers: str | Iterable[str]) -> Single[Status]:
        """Add one or more users to the conversation."""
        if isinstance(user_identifiers, str):
            user_identifiers = [user_identifiers]
        return self._edit("add_user/", {"user_ids": json_ids(user_identifiers)})

    def leave(self) -> Single[Status]:
        return self._edit("leave/")

    def mute(self) -> Single[Status]:
        return self._edit("mute/")

    def unmute(self) -> Single[Status]:
        return self._edit("unmute/")

    def title(self, title: str) -> Single[Status]:
        """Rename the conversation."""
        return self._edit("update_title/", {"title": title})

    def send(self, text: str) -> Single[ResponseView]:
        """Send ``text``, as a link item when it contains URLs."""
        message = compose_message(text)
        return single_endpoint(
            actions.SEND_SPEC,
            actions.SendAdapter(),
            self._base,
            {
                "conversation": self.identifier,
                "mode": message.mode,
                "fields": dict(message.fields),
            },
        )

    def __repr__(self) -> str:
        return f"ConversationEndpoints({self.identifier!r})"
