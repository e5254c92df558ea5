"""Discovery endpoints."""

from .group import Discover

__all__ = ["Discover"]
