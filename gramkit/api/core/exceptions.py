"""Custom exception hierarchy."""

from __future__ import annotations


class ClientError(Exception):
    """Base exception for all library errors."""

    pass


class TransportError(ClientError):
    """Network or HTTP failure reported by the transport."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code


class RateLimitError(TransportError):
    """Vendor rate limit still in effect after the transport gave up waiting."""

    def __init__(self, message: str, retry_after: float = 60.0, status_code: int = 429) -> None:
        super().__init__(message, status_code=status_code)
        self.retry_after = retry_after


class DecodeError(ClientError):
    """Response body is not valid JSON."""

    def __init__(self, message: str, payload: bytes | None = None) -> None:
        super().__init__(message)
        self.payload = payload


class EndpointError(ClientError):
    """Endpoint is not registered or is missing its adapter."""

    pass
