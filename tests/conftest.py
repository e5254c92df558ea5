"""Shared fixtures: session credentials and a recording transport."""

from __future__ import annotations

import json
from collections import deque
from typing import Any
from uuid import UUID

import pytest

from gramkit.api.core import Credentials, Device, RequestSpec


class RecordingTransport:
    """Transport returning queued JSON payloads and recording each request."""

    def __init__(self, *payloads: Any) -> None:
        self.requests: list[RequestSpec] = []
        self._payloads: deque[Any] = deque(payloads)

    def queue(self, *payloads: Any) -> None:
        self._payloads.extend(payloads)

    async def execute(self, request: RequestSpec) -> bytes:
        self.requests.append(request)
        payload = self._payloads.popleft()
        if isinstance(payload, Exception):
            raise payload
        if isinstance(payload, bytes):
            return payload
        return json.dumps(payload).encode()


@pytest.fixture
def credentials():
    """Logged in session with a fixed device."""
    return Credentials(
        cookies={"sessionid": "session-secret", "csrftoken": "csrf-token", "ds_user_id": "42"},
        headers={"Authorization": "Bearer IGT:2:token"},
        device=Device(identifier=UUID("12345678-1234-5678-1234-567812345678")),
    )


@pytest.fixture
def transport():
    """Empty recording transport; tests queue the payloads they need."""
    return RecordingTransport()
