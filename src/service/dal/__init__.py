"""
Upstream access layer.

Handlers reach the third-party APIs only through an ``UpstreamApiHandler``,
so tests and alternative transports can be injected into the services.
"""

from typing import Any, Dict, Protocol, runtime_checkable

from service.dal.exceptions import UpstreamHttpError, UpstreamTransportError


@runtime_checkable
class UpstreamApiHandler(Protocol):
    """Protocol defining the upstream HTTP interface."""

    def post_json(self, url: str, payload: Dict[str, Any], headers: Dict[str, str]) -> Any:
        """POST ``payload`` as JSON and return the decoded response body.

        Raises UpstreamHttpError on non-2xx responses and
        UpstreamTransportError when no response was received.
        """
        ...


def get_upstream_handler() -> UpstreamApiHandler:
    """Factory for the default upstream handler."""
    from service.dal.httpx_handler import HttpxApiHandler
    return HttpxApiHandler()


__all__ = [
    "UpstreamApiHandler",
    "UpstreamHttpError",
    "UpstreamTransportError",
    "get_upstream_handler",
]
