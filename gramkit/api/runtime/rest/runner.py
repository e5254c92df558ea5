"""REST request runner using endpoint specs and response adapters."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from ...core.credentials import Credentials
from ...core.request import RequestSpec
from ...core.response import ResponseView
from .transport import Transport

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RestEndpointSpec:
    id: str
    method: str  # "GET" | "POST"
    build_path: Callable[[dict[str, Any]], str]
    build_query: Callable[[dict[str, Any]], Mapping[str, Any]] | None = None
    build_body: Callable[[dict[str, Any]], Mapping[str, Any]] | None = None
    build_headers: Callable[[dict[str, Any]], Mapping[str, str | None]] | None = None
    # Credential-derived body fields ("_csrftoken", "_uuid", "device_id")
    session_body: tuple[str, ...] = ()
    # Cookie-derived query fields as (query key, cookie name) pairs
    session_query: tuple[tuple[str, str], ...] = ()
    # Paginated specs read params["cursor"]; ranked ones also params["rank_token"]
    paginated: bool = False
    ranked: bool = False


class ResponseAdapter:
    def parse(self, response: ResponseView, params: dict[str, Any]) -> Any:
        return response

    def next_cursor(self, parsed: Any) -> str | None:
        """Cursor for the page after ``parsed`` (paginated endpoints only)."""
        return getattr(parsed, "next_cursor", None)


class RestRunner:
    def __init__(self, transport: Transport) -> None:
        self._t = transport

    @staticmethod
    def build(
        *,
        spec: RestEndpointSpec,
        base: RequestSpec,
        credentials: Credentials,
        params: dict[str, Any],
    ) -> RequestSpec:
        request = (
            base.appending_path(spec.build_path(params))
            .with_method(spec.method)
            .appending_header(credentials.header())
        )
        if spec.build_headers:
            request = request.appending_header(spec.build_headers(params))
        if spec.build_query:
            request = request.appending_query(spec.build_query(params))
        if spec.session_query:
            request = request.appending_query(
                {key: credentials[cookie] for key, cookie in spec.session_query}
            )
        if spec.session_body:
            fields = credentials.session_fields()
            request = request.appending_body({key: fields.get(key) for key in spec.session_body})
        if spec.build_body:
            request = request.appending_body(spec.build_body(params))
        return request

    async def run(
        self,
        *,
        spec: RestEndpointSpec,
        adapter: ResponseAdapter,
        base: RequestSpec,
        credentials: Credentials,
        params: dict[str, Any],
    ) -> Any:
        request = self.build(spec=spec, base=base, credentials=credentials, params=params)
        logger.debug(
            "Executing endpoint",
            extra={
                "endpoint_id": spec.id,
                "method": request.resolved_method,
                "path": request.path_string,
            },
        )
        data = await self._t.execute(request)
        # Models borrow the parsed tree: decode and map within the fetch
        return adapter.parse(ResponseView.from_bytes(data), params)
