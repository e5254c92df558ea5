"""User endpoint group (``users``)."""

from __future__ import annotations

from gramkit.api.core.config import ClientConfig
from gramkit.api.core.response import ResponseView
from gramkit.api.models import UserCollection, UserUnit
from gramkit.api.runtime.endpoint import Paginated, Single, paginated_endpoint, single_endpoint
from gramkit.api.runtime.pagination import RankedCursor

from . import blocked, info, search


class Users:
    """Profile lookup and search. Requires authentication."""

    def __init__(self, config: ClientConfig | None = None) -> None:
        self.config = config or ClientConfig()
        self._base = self.config.request("users")

    @property
    def blocked(self) -> Single[ResponseView]:
        """Profiles blocked by the logged in user."""
        return single_endpoint(blocked.SPEC, blocked.Adapter(), self._base)

    def summary(self, identifier: str) -> Single[UserUnit]:
        """Profile info for the user matching ``identifier``."""
        if not identifier:
            raise ValueError("User identifier must be a non-empty string")
        return single_endpoint(info.SPEC, info.Adapter(), self._base, {"user": identifier})

    def search(self, query: str) -> Paginated[UserCollection, RankedCursor]:
        """Users matching ``query``.

        Each call to ``pages()`` starts a new logical query with a fresh
        rank token, unless resumed from a saved PagerState.
        """
        return paginated_endpoint(search.SPEC, search.Adapter(), self._base, {"query": query})
