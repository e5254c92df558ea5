"""Friendship endpoint group (``friendships``)."""

from __future__ import annotations

from collections.abc import Iterable

from gramkit.api.core.config import ClientConfig
from gramkit.api.models import Friendship, FriendshipCollection, UserCollection
from gramkit.api.runtime.endpoint import Paginated, Single, paginated_endpoint, single_endpoint
from gramkit.api.runtime.pagination import RankedCursor

from . import followers, show


def _require(identifier: str) -> str:
    if not identifier:
        raise ValueError("User identifier must be a non-empty string")
    return identifier


class Friendships:
    """Relationship status and follow lists. Requires authentication."""

    def __init__(self, config: ClientConfig | None = None) -> None:
        self.config = config or ClientConfig()
        self._base = self.config.request("friendships")

    def summary(self, identifier: str) -> Single[Friendship]:
        """Relationship between the logged in user and ``identifier``."""
        return single_endpoint(
            show.SHOW_SPEC, show.ShowAdapter(), self._base, {"user": _require(identifier)}
        )

    def summaries(self, identifiers: Iterable[str]) -> Single[FriendshipCollection]:
        """Relationships with every user in ``identifiers``, keyed by id."""
        users = [_require(identifier) for identifier in identifiers]
        if not users:
            raise ValueError("At least one user identifier is required")
        return single_endpoint(
            show.SHOW_MANY_SPEC, show.ShowManyAdapter(), self._base, {"users": users}
        )

    def followers(self, identifier: str) -> Paginated[UserCollection, RankedCursor]:
        return paginated_endpoint(
            followers.FOLLOWERS_SPEC,
            followers.Adapter(),
            self._base,
            {"user": _require(identifier)},
        )

    def following(self, identifier: str) -> Paginated[UserCollection, RankedCursor]:
        return paginated_endpoint(
            followers.FOLLOWING_SPEC,
            followers.Adapter(),
            self._base,
            {"user": _require(identifier)},
        )
