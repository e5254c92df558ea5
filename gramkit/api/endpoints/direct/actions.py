"""Direct thread write endpoints: thread edits and message sending."""

from __future__ import annotations

import uuid
from typing import Any

from gramkit.api.core.response import ResponseView
from gramkit.api.models import Status
from gramkit.api.runtime.rest import ResponseAdapter, RestEndpointSpec

from .composer import json_ids


def build_edit_path(params: dict[str, Any]) -> str:
    """Build ``threads/{id}/{action}`` (e.g. ``hide/``, ``update_title/``)."""
    return f"threads/{params['conversation']}/{params['action']}"


def build_edit_body(params: dict[str, Any]) -> dict[str, Any]:
    return dict(params.get("body") or {})


EDIT_SPEC = RestEndpointSpec(
    id="direct_thread_edit",
    method="POST",
    build_path=build_edit_path,
    build_body=build_edit_body,
    session_body=("_csrftoken", "_uuid"),
)


def build_send_path(params: dict[str, Any]) -> str:
    return f"threads/broadcast/{params['mode']}/"


def build_send_body(params: dict[str, Any]) -> dict[str, Any]:
    """Build the broadcast body.

    ``client_context`` is regenerated every time a request is built; the
    server uses it to deduplicate sends.
    """
    return {
        "thread_ids": json_ids([params["conversation"]]),
        **params["fields"],
        "client_context": str(uuid.uuid4()),
        "action": "send_item",
    }


SEND_SPEC = RestEndpointSpec(
    id="direct_send",
    method="POST",
    build_path=build_send_path,
    build_body=build_send_body,
    session_body=("_csrftoken", "_uuid", "device_id"),
)


class EditAdapter(ResponseAdapter):
    def parse(self, response: ResponseView, params: dict[str, Any]) -> Status:
        return Status(response)


# Broadcast payloads differ per item type; callers get the raw view
SendAdapter = ResponseAdapter
