"""Ranked direct recipients."""

from __future__ import annotations

from .base import ResponseModel, StatusModel
from .conversation import Conversation
from .user import User


class Recipient(ResponseModel):
    """A suggested recipient: either a user or an existing thread."""

    __slots__ = ()

    _repr_fields = ("user", "conversation")

    @property
    def user(self) -> User | None:
        view = self["user"]
        return User(view) if view.dictionary() is not None else None

    @property
    def conversation(self) -> Conversation | None:
        view = self["thread"]
        return Conversation(view) if view.dictionary() is not None else None


class RecipientCollection(StatusModel):
    __slots__ = ()

    _repr_fields = ("recipients", "status")

    @property
    def recipients(self) -> list[Recipient] | None:
        views = self["rankedRecipients"].array()
        return [Recipient(view) for view in views] if views is not None else None

    @property
    def expires(self) -> int | None:
        """Seconds the ranking stays valid."""
        return self["expires"].int()

    def __len__(self) -> int:
        return len(self.recipients or [])
