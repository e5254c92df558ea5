"""User info endpoint definition and adapter."""

from __future__ import annotations

from typing import Any

from gramkit.api.core.response import ResponseView
from gramkit.api.models import UserUnit
from gramkit.api.runtime.rest import ResponseAdapter, RestEndpointSpec


def build_path(params: dict[str, Any]) -> str:
    return f"{params['user']}/info/"


SPEC = RestEndpointSpec(
    id="user_info",
    method="GET",
    build_path=build_path,
)


class Adapter(ResponseAdapter):
    def parse(self, response: ResponseView, params: dict[str, Any]) -> UserUnit:
        return UserUnit(response)
