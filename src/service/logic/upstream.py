"""
Shared upstream call wrapper.

Turns upstream handler failures into UpstreamServiceError so the handler
layer sees one error type regardless of what went wrong on the wire.
"""

import json
from typing import Any, Dict

from aws_lambda_powertools.metrics import MetricUnit

from service.dal import UpstreamApiHandler, UpstreamHttpError, UpstreamTransportError
from service.handlers.utils.errors import UpstreamServiceError
from service.handlers.utils.observability import logger, metrics, tracer

# Never logged in clear.
SECRET_HEADERS = frozenset({'authorization', 'x-gravitee-api-key'})


def redact_headers(headers: Dict[str, str]) -> Dict[str, str]:
    return {
        name: '***' if name.lower() in SECRET_HEADERS else value
        for name, value in headers.items()
    }


@tracer.capture_method
def call_upstream(
    upstream: UpstreamApiHandler,
    service_name: str,
    url: str,
    payload: Dict[str, Any],
    headers: Dict[str, str],
) -> Any:
    """
    POST ``payload`` to ``url`` exactly once.

    Returns:
        Decoded upstream response body

    Raises:
        UpstreamServiceError: carrying the upstream status and body when the
            upstream answered with a non-2xx status, or status 500 otherwise
    """
    logger.info(f'{service_name} API request', extra={
        'url': url,
        'payload': payload,
        'headers': redact_headers(headers),
        'has_api_key': bool(headers.get('Authorization') or headers.get('X-Gravitee-Api-Key')),
    })

    try:
        data = upstream.post_json(url, payload, headers)
    except UpstreamHttpError as exc:
        logger.error(f'{service_name} API error response', extra={
            'url': url,
            'status_code': exc.status_code,
            'response_data': exc.body,
            'response_headers': exc.headers,
        })
        metrics.add_metric(name="UpstreamError", unit=MetricUnit.Count, value=1)
        raise UpstreamServiceError(
            message=exc.message,
            service_name=service_name,
            status_code=exc.status_code,
            details=exc.body,
            has_response=True,
        ) from exc
    except UpstreamTransportError as exc:
        logger.exception(f'{service_name} API request failed', extra={'url': url})
        metrics.add_metric(name="UpstreamError", unit=MetricUnit.Count, value=1)
        raise UpstreamServiceError(
            message=exc.message,
            service_name=service_name,
        ) from exc

    logger.info(f'{service_name} API response', extra={'response_data': json.dumps(data, default=str)})
    metrics.add_metric(name="UpstreamSuccess", unit=MetricUnit.Count, value=1)
    return data
