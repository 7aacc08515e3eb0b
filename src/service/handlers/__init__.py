"""
AWS Lambda Handlers Module.

Handler cores for the upstream proxies. Each core takes the raw event and the
request ID and returns a HandlerResult; the function entry points under
``src/<function>/lambda_function.py`` wrap them with Powertools and translate
the result into an API Gateway response.

The handlers use AWS Lambda Powertools for:
- Structured logging with correlation IDs
- Distributed tracing with X-Ray
- Custom metrics collection
"""

from service.handlers.utils.observability import logger, tracer, metrics

__all__ = [
    "logger",
    "tracer",
    "metrics",
]
