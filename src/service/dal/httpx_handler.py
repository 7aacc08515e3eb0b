"""
httpx implementation of the upstream access layer.
"""

from typing import Any, Dict, Optional

import httpx

from service.dal.exceptions import UpstreamHttpError, UpstreamTransportError
from service.handlers.utils.observability import logger, tracer


def decode_body(response: httpx.Response) -> Any:
    """Decode a response body: JSON when possible, raw text otherwise, None when empty."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


class HttpxApiHandler:
    """Issues one POST per call with a short-lived httpx client."""

    def __init__(self, transport: Optional[httpx.BaseTransport] = None) -> None:
        self._transport = transport

    @tracer.capture_method
    def post_json(self, url: str, payload: Dict[str, Any], headers: Dict[str, str]) -> Any:
        # A fresh client per call: invocations share no connection pool.
        try:
            with httpx.Client(transport=self._transport) as client:
                response = client.post(url, json=payload, headers=headers)
        except httpx.RequestError as exc:
            raise UpstreamTransportError(str(exc) or exc.__class__.__name__) from exc

        logger.debug('Upstream responded', extra={
            'url': url,
            'status_code': response.status_code,
        })
        if not response.is_success:
            raise UpstreamHttpError(
                status_code=response.status_code,
                body=decode_body(response),
                headers=dict(response.headers),
            )
        return decode_body(response)
