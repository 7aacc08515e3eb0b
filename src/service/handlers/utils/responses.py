"""
Response mapping for handler cores.

``handle_service_errors`` is the single place where exceptions raised by a
handler core become ErrorResult values.
"""

from functools import wraps
from typing import Any, Callable, Dict

from aws_lambda_powertools.metrics import MetricUnit

from service.handlers.utils.errors import (
    BaseServiceError,
    UpstreamServiceError,
    ValidationError,
    log_error_metrics,
)
from service.handlers.utils.observability import logger, metrics
from service.models.output import BadRequestOutput, ErrorOutput
from service.models.result import ErrorResult, HandlerResult, SuccessResult

UNEXPECTED_ERROR_MESSAGE = 'An unexpected error occurred'


def success_result(body: Any) -> SuccessResult:
    """Wrap a pydantic output model into a 200 result."""
    return SuccessResult(status_code=200, body=body.model_dump(by_alias=True))


def bad_request_result(error: ValidationError) -> ErrorResult:
    return ErrorResult(
        status_code=400,
        body=BadRequestOutput(error=error.message).model_dump(),
    )


def failure_result(error: Exception, error_label: str, request_id: str) -> ErrorResult:
    """
    Map a failed operation into an ErrorResult.

    Upstream failures that carry a response keep its status and body as
    ``details``; everything else becomes a 500.
    """
    if isinstance(error, BaseServiceError):
        status_code = error.status_code
        message = error.message
    else:
        status_code = 500
        message = UNEXPECTED_ERROR_MESSAGE

    body: Dict[str, Any] = ErrorOutput(
        error=error_label,
        message=message,
        request_id=request_id,
    ).model_dump(by_alias=True, exclude={'details'})

    # details may legitimately be null when the upstream sent an empty body
    if isinstance(error, UpstreamServiceError) and error.has_response:
        body['details'] = error.details
    return ErrorResult(status_code=status_code, body=body)


def handle_service_errors(error_label: str) -> Callable[[Callable[..., HandlerResult]], Callable[..., HandlerResult]]:
    """Decorator turning handler core exceptions into ErrorResult values.

    The decorated function must take ``(event, request_id, ...)``.
    """

    def decorator(func: Callable[..., HandlerResult]) -> Callable[..., HandlerResult]:
        @wraps(func)
        def wrapper(event: Dict[str, Any], request_id: str, *args: Any, **kwargs: Any) -> HandlerResult:
            try:
                return func(event, request_id, *args, **kwargs)

            except ValidationError as e:
                logger.warning("Request validation failed", extra={
                    "error": e.message,
                    "request_id": request_id,
                })
                metrics.add_metric(name="ValidationError", unit=MetricUnit.Count, value=1)
                return bad_request_result(e)

            except BaseServiceError as e:
                log_error_metrics(e)
                return failure_result(e, error_label, request_id)

            except Exception as e:
                logger.exception("Unexpected error in handler", extra={
                    "error": str(e),
                    "function_name": func.__name__,
                    "request_id": request_id,
                })
                metrics.add_metric(name="UnexpectedError", unit=MetricUnit.Count, value=1)
                return failure_result(e, error_label, request_id)

        return wrapper

    return decorator
