"""Discovery endpoint group (suggested users and explore feeds)."""

from __future__ import annotations

from gramkit.api.core.config import ClientConfig
from gramkit.api.models import FeedPage, UserCollection
from gramkit.api.runtime.endpoint import Paginated, Single, paginated_endpoint, single_endpoint

from . import chaining, explore


class Discover:
    """Discovery surfaces. Requires authentication."""

    def __init__(self, config: ClientConfig | None = None) -> None:
        self.config = config or ClientConfig()
        self._base = self.config.request("discover")

    def users_like(self, identifier: str) -> Single[UserCollection]:
        """Profiles suggested alongside the user matching ``identifier``."""
        if not identifier:
            raise ValueError("User identifier must be a non-empty string")
        return single_endpoint(
            chaining.SPEC, chaining.Adapter(), self._base, {"user": identifier}
        )

    @property
    def explore(self) -> Paginated[FeedPage, str]:
        return paginated_endpoint(explore.EXPLORE_SPEC, explore.Adapter(), self._base)

    @property
    def topics(self) -> Paginated[FeedPage, str]:
        """Paginate the sectional explore feed."""
        return paginated_endpoint(explore.TOPICS_SPEC, explore.Adapter(), self._base)
