"""User profile models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from yarl import URL

from .base import ResponseModel, StatusModel, identifier
from .friendship import Friendship


class Access(Enum):
    """Profile visibility."""

    DEFAULT = 0
    PRIVATE = 1
    VERIFIED = 2


class Counter(BaseModel):
    """Profile counters."""

    posts: int = Field(..., ge=0)
    followers: int = Field(..., ge=0)
    following: int = Field(..., ge=0)
    tags: int = 0
    clips: int = 0
    effects: int = 0
    igtv: int = 0

    model_config = ConfigDict(frozen=True)


class User(ResponseModel):
    """A user profile."""

    __slots__ = ()

    _repr_fields = (
        "identifier",
        "username",
        "name",
        "biography",
        "thumbnail",
        "avatar",
        "access",
        "counter",
        "friendship",
    )

    @property
    def identifier(self) -> str | None:
        return identifier(self["pk"])

    @property
    def username(self) -> str | None:
        return self["username"].string()

    @property
    def name(self) -> str | None:
        return self["fullName"].string()

    @property
    def biography(self) -> str | None:
        return self["biography"].string()

    @property
    def thumbnail(self) -> URL | None:
        """Lower quality avatar."""
        return self["profilePicUrl"].url()

    @property
    def avatar(self) -> URL | None:
        """Highest resolution avatar available."""
        versions = self["hdProfilePicVersions"].array() or []
        best = max(
            versions,
            key=lambda version: (version["width"].double() or 0) * (version["height"].double() or 0),
            default=None,
        )
        url = best["url"].url() if best is not None else None
        return url or self["hdProfilePicUrlInfo"]["url"].url()

    @property
    def access(self) -> Access | None:
        is_private = self["isPrivate"].bool()
        is_verified = self["isVerified"].bool()
        if is_private is None and is_verified is None:
            return None
        if is_private:
            return Access.PRIVATE
        if is_verified:
            return Access.VERIFIED
        return Access.DEFAULT

    @property
    def counter(self) -> Counter | None:
        posts = self["mediaCount"].int()
        followers = self["followerCount"].int()
        following = self["followingCount"].int()
        if posts is None or followers is None or following is None:
            return None
        try:
            return Counter(
                posts=posts,
                followers=followers,
                following=following,
                tags=self["usertagsCount"].int() or 0,
                clips=self["totalClipsCount"].int() or 0,
                effects=self["totalArEffects"].int() or 0,
                igtv=self["totalIgtvVideos"].int() or 0,
            )
        except ValidationError:
            return None

    @property
    def friendship(self) -> Friendship | None:
        view = self["friendship"]
        if view.dictionary() is None:
            view = self["friendshipStatus"]
        return Friendship(view) if view.dictionary() is not None else None


class UserUnit(StatusModel):
    """Single user response (``{"user": {...}, "status": "ok"}``)."""

    __slots__ = ()

    _repr_fields = ("user", "status")

    @property
    def user(self) -> User | None:
        view = self["user"]
        return User(view) if view.dictionary() is not None else None


class UserCollection(StatusModel):
    """One page of users."""

    __slots__ = ()

    _repr_fields = ("users", "status")

    @property
    def users(self) -> list[User] | None:
        views = self["users"].array()
        return [User(view) for view in views] if views is not None else None

    @property
    def next_cursor(self) -> str | None:
        if self["moreAvailable"].bool() is False:
            return None
        return identifier(self["nextMaxId"])

    def __len__(self) -> int:
        return len(self.users or [])
