"""User endpoints."""

from .group import Users

__all__ = ["Users"]
