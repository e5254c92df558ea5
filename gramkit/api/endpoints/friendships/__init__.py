"""Friendship endpoints."""

from .group import Friendships

__all__ = ["Friendships"]
