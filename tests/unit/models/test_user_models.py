"""Unit tests for user and friendship models."""

from __future__ import annotations

from yarl import URL

from gramkit.api.models import (
    Access,
    Counter,
    Friendship,
    FriendshipCollection,
    User,
    UserCollection,
    UserUnit,
)

USER = {
    "pk": 25025320,
    "username": "instagram",
    "full_name": "Instagram",
    "biography": "Bringing you closer.",
    "profile_pic_url": "https://cdn.example.com/small.jpg",
    "hd_profile_pic_versions": [
        {"width": 320, "height": 320, "url": "https://cdn.example.com/320.jpg"},
        {"width": 640, "height": 640, "url": "https://cdn.example.com/640.jpg"},
    ],
    "is_private": False,
    "is_verified": True,
    "media_count": 10,
    "follower_count": 1000,
    "following_count": 5,
    "usertags_count": 2,
    "friendship_status": {"following": True, "followed_by": False, "blocking": False},
}


class TestUser:
    """Test User projections."""

    def test_fields(self):
        user = User(USER)
        assert user.identifier == "25025320"
        assert user.username == "instagram"
        assert user.name == "Instagram"
        assert user.biography == "Bringing you closer."
        assert user.thumbnail == URL("https://cdn.example.com/small.jpg")

    def test_avatar_picks_largest_version(self):
        assert User(USER).avatar == URL("https://cdn.example.com/640.jpg")

    def test_avatar_falls_back_to_url_info(self):
        user = User({"hd_profile_pic_url_info": {"url": "https://cdn.example.com/hd.jpg"}})
        assert user.avatar == URL("https://cdn.example.com/hd.jpg")

    def test_access(self):
        assert User(USER).access is Access.VERIFIED
        assert User({"is_private": True, "is_verified": True}).access is Access.PRIVATE
        assert User({"is_private": False}).access is Access.DEFAULT
        assert User({}).access is None

    def test_counter(self):
        counter = User(USER).counter
        assert counter == Counter(posts=10, followers=1000, following=5, tags=2)
        assert User({"media_count": 1}).counter is None

    def test_negative_counter_is_none(self):
        user = User({"media_count": -1, "follower_count": 5, "following_count": 3})
        assert user.counter is None

    def test_friendship_from_status(self):
        friendship = User(USER).friendship
        assert friendship.is_followed_by_you is True
        assert friendship.is_following_you is False

    def test_missing_fields_are_none(self):
        user = User({})
        assert user.identifier is None
        assert user.avatar is None
        assert user.friendship is None

    def test_equality_and_repr(self):
        assert User(USER) == User(dict(USER))
        assert "instagram" in repr(User(USER))


class TestUserContainers:
    """Test unit and collection wrappers."""

    def test_unit(self):
        unit = UserUnit({"user": USER, "status": "ok"})
        assert unit.user.username == "instagram"
        assert unit.is_ok

    def test_collection_cursor(self):
        collection = UserCollection({"users": [USER], "next_max_id": 100, "status": "ok"})
        assert len(collection) == 1
        assert collection.next_cursor == "100"

    def test_collection_no_more_available(self):
        collection = UserCollection({"users": [USER], "next_max_id": "x", "more_available": False})
        assert collection.next_cursor is None

    def test_empty_collection(self):
        assert len(UserCollection({"status": "ok"})) == 0


class TestFriendship:
    """Test friendship projections."""

    def test_flags(self):
        friendship = Friendship(
            {
                "following": True,
                "followed_by": True,
                "blocking": False,
                "is_bestie": True,
                "incoming_request": False,
                "outgoing_request": False,
                "is_muting_reel": False,
                "muting": True,
            }
        )
        assert friendship.is_followed_by_you is True
        assert friendship.is_close_friend is True
        assert friendship.is_muting_posts is True
        assert friendship.did_request_to_follow is False

    def test_collection(self):
        collection = FriendshipCollection(
            {"friendship_statuses": {"1": {"following": True}, "2": {"following": False}}}
        )
        assert len(collection) == 2
        assert collection.friendships["1"].is_followed_by_you is True
