"""Friendship status models."""

from __future__ import annotations

from .base import ResponseModel, StatusModel


class Friendship(ResponseModel):
    """Relationship between the logged in user and another profile."""

    __slots__ = ()

    _repr_fields = (
        "is_followed_by_you",
        "is_following_you",
        "is_blocked_by_you",
        "is_close_friend",
        "did_request_to_follow_you",
        "did_request_to_follow",
        "is_muting_stories",
        "is_muting_posts",
    )

    @property
    def is_followed_by_you(self) -> bool | None:
        return self["following"].bool()

    @property
    def is_following_you(self) -> bool | None:
        return self["followedBy"].bool()

    @property
    def is_blocked_by_you(self) -> bool | None:
        return self["blocking"].bool()

    @property
    def is_close_friend(self) -> bool | None:
        return self["isBestie"].bool()

    @property
    def did_request_to_follow_you(self) -> bool | None:
        return self["incomingRequest"].bool()

    @property
    def did_request_to_follow(self) -> bool | None:
        return self["outgoingRequest"].bool()

    @property
    def is_muting_stories(self) -> bool | None:
        return self["isMutingReel"].bool()

    @property
    def is_muting_posts(self) -> bool | None:
        return self["muting"].bool()


class FriendshipCollection(StatusModel):
    """Friendship statuses keyed by user identifier."""

    __slots__ = ()

    _repr_fields = ("friendships", "status")

    @property
    def friendships(self) -> dict[str, Friendship] | None:
        statuses = self["friendshipStatuses"].dictionary()
        if statuses is None:
            return None
        return {key: Friendship(view) for key, view in statuses.items()}

    def __len__(self) -> int:
        return len(self.friendships or {})
