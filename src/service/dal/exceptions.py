"""
Errors raised by upstream handlers, independent of the HTTP client in use.
"""

from typing import Any, Dict, Optional


class UpstreamHttpError(Exception):
    """The upstream answered with a non-2xx status."""

    def __init__(
        self,
        status_code: int,
        body: Any = None,
        headers: Optional[Dict[str, str]] = None,
        message: Optional[str] = None,
    ):
        self.status_code = status_code
        self.body = body
        self.headers = headers or {}
        self.message = message or f'Request failed with status code {status_code}'
        super().__init__(self.message)


class UpstreamTransportError(Exception):
    """No response was received (connection failure, timeout, protocol error)."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)
