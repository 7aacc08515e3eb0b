"""
Upstream proxy service module.

Shared implementation behind the Lambda function entry points, laid out in
three layers:

- handlers: request adaptation, error mapping and result construction
- logic: payload builders and the single upstream call per operation
- dal: HTTP access to the third-party APIs
- models: request, payload, response and result models
"""

__version__ = "1.0.0"
__description__ = "Serverless proxies for the addy.io and Auchan newsletter APIs"

from service.models.result import ErrorResult, HandlerResult, SuccessResult, to_api_response
from service.handlers.utils.observability import logger, tracer, metrics

__all__ = [
    "ErrorResult",
    "HandlerResult",
    "SuccessResult",
    "to_api_response",
    "logger",
    "tracer",
    "metrics",
]
