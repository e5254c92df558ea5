"""Direct presence endpoint definition.

The presence payload (``user_presence`` keyed by user id) is returned as a
raw ResponseView.
"""

from __future__ import annotations

from gramkit.api.runtime.rest import ResponseAdapter, RestEndpointSpec

SPEC = RestEndpointSpec(
    id="direct_presence",
    method="GET",
    build_path=lambda _params: "get_presence/",
)

Adapter = ResponseAdapter
