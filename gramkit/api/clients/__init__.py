"""High-level clients."""

from .api_client import APIClient

__all__ = ["APIClient"]
