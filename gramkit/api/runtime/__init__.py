"""Runtime orchestration components."""

from .endpoint import Paginated, Single, paginated_endpoint, single_endpoint
from .pagination import CursorPager, Page, PagerState, RankedCursor, RankedPager
from .rest import RESTTransport, RestEndpointSpec, RestRunner, ResponseAdapter, Transport

__all__ = [
    "Single",
    "Paginated",
    "single_endpoint",
    "paginated_endpoint",
    "CursorPager",
    "RankedPager",
    "Page",
    "PagerState",
    "RankedCursor",
    "Transport",
    "RESTTransport",
    "RestRunner",
    "RestEndpointSpec",
    "ResponseAdapter",
]
