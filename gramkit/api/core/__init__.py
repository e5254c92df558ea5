"""Core components."""

from .config import ClientConfig
from .credentials import Credentials, Device
from .exceptions import (
    ClientError,
    DecodeError,
    EndpointError,
    RateLimitError,
    TransportError,
)
from .request import RequestSpec
from .response import ResponseView, snake_case

__all__ = [
    "ClientConfig",
    "Credentials",
    "Device",
    "RequestSpec",
    "ResponseView",
    "snake_case",
    "ClientError",
    "TransportError",
    "RateLimitError",
    "DecodeError",
    "EndpointError",
]
