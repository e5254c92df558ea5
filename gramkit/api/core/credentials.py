"""Session credentials and device identity."""

from __future__ import annotations

import hashlib
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

__all__ = ["Credentials", "Device"]


class Device(BaseModel):
    """Stable per-installation device identity."""

    identifier: UUID = Field(default_factory=uuid4)

    model_config = ConfigDict(frozen=True)

    @property
    def vendor_identifier(self) -> str:
        """Vendor-style device id (``android-`` followed by 16 hex chars)."""
        digest = hashlib.md5(self.identifier.bytes, usedforsecurity=False).hexdigest()
        return f"android-{digest[:16]}"


class Credentials(BaseModel):
    """Authenticated session values.

    Cookies hold the session (``sessionid``, ``csrftoken``, ``ds_user_id``),
    headers hold rotating tokens the server hands back (``Authorization``,
    ``X-IG-WWW-Claim``). Values are excluded from ``repr`` so credentials
    can be passed through logging calls safely.
    """

    cookies: dict[str, str] = Field(default_factory=dict, repr=False)
    headers: dict[str, str] = Field(default_factory=dict, repr=False)
    device: Device = Field(default_factory=Device)

    model_config = ConfigDict(frozen=True)

    def __getitem__(self, key: str) -> str | None:
        return self.cookies.get(key)

    @property
    def identifier(self) -> str | None:
        """Logged-in user identifier."""
        return self["ds_user_id"]

    def header(self) -> dict[str, str]:
        """Header fields authenticating a request."""
        fields: dict[str, str] = {}
        if self.cookies:
            fields["Cookie"] = "; ".join(f"{key}={value}" for key, value in self.cookies.items())
        fields.update(self.headers)
        return fields

    def session_fields(self) -> dict[str, str | None]:
        """Body fields identifying the session and device on write requests."""
        return {
            "_csrftoken": self["csrftoken"],
            "_uuid": str(self.device.identifier),
            "device_id": self.device.vendor_identifier,
        }

    def __str__(self) -> str:
        return f"Credentials(identifier={self.identifier!r}, cookies={sorted(self.cookies)!r})"
