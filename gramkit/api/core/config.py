"""Client configuration and vendor constants.

This module centralizes the base URL, API version prefix and default
headers every request starts from. The values live in one immutable
ClientConfig constructed by the caller and handed to endpoint groups and
transports, so there is no process-wide mutable state.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from .request import RequestSpec

BASE_URL = "https://i.instagram.com"
API_VERSION = "api/v1"

# Android app identity sent with every request
APP_ID = "567067343352427"
USER_AGENT = (
    "Instagram 160.1.0.31.120 Android "
    "(29/10; 420dpi; 1080x2094; samsung; SM-G975F; beyond2; exynos9820; en_US; 246979827)"
)

DEFAULT_PAGE_LIMIT = 20


@dataclass(frozen=True)
class ClientConfig:
    """Immutable client configuration.

    Attributes:
        base_url: Scheme and host of the private API
        api_version: Path prefix shared by all routes
        user_agent: User agent identifying the app build
        app_id: Application identifier header value
        locale: Locale reported to the server
        extra_headers: Additional headers merged into every request
        timeout: Total request timeout in seconds
        max_rate_limit_retries: Times the transport waits out a 429 before failing
    """

    base_url: str = BASE_URL
    api_version: str = API_VERSION
    user_agent: str = USER_AGENT
    app_id: str = APP_ID
    locale: str = "en_US"
    extra_headers: Mapping[str, str] = field(default_factory=dict)
    timeout: float = 30.0
    max_rate_limit_retries: int = 2

    def __post_init__(self) -> None:
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")
        if self.max_rate_limit_retries < 0:
            raise ValueError("max_rate_limit_retries cannot be negative")

    def default_headers(self) -> dict[str, str]:
        """Headers sent with every request, before credentials are attached."""
        headers = {
            "User-Agent": self.user_agent,
            "X-IG-App-ID": self.app_id,
            "X-IG-App-Locale": self.locale,
            "X-IG-Device-Locale": self.locale,
            "X-IG-Capabilities": "3brTvw==",
            "X-IG-Connection-Type": "WIFI",
            "Accept-Language": self.locale.replace("_", "-"),
        }
        headers.update(self.extra_headers)
        return headers

    def request(self, *segments: str) -> RequestSpec:
        """Base request for a route group (default headers plus version prefix).

        Example:
            >>> ClientConfig().request("direct_v2").path_string
            'api/v1/direct_v2'
        """
        return (
            RequestSpec()
            .appending_path(self.api_version, *segments)
            .appending_header(self.default_headers())
        )
