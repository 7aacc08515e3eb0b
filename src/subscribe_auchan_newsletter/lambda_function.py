"""
Subscribe Auchan Newsletter Lambda Function.

Accepts either an API Gateway proxy event with body ``{"email": ...}`` or a
direct invocation payload ``{"email": ...}``. Both get the same API Gateway
style response.
"""

from typing import Any, Dict

from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext

from service.handlers.newsletter_handler import subscribe_newsletter
from service.handlers.utils.observability import logger, metrics, tracer
from service.handlers.utils.request import get_request_id
from service.models.result import to_api_response


@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST, log_event=True)
@metrics.log_metrics(capture_cold_start_metric=True)
def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    Lambda function entry point for newsletter subscriptions.

    Args:
        event: API Gateway proxy event or direct invocation payload
        context: Lambda context object

    Returns:
        API Gateway response dictionary
    """
    metrics.add_metric(name="RequestCount", unit=MetricUnit.Count, value=1)
    tracer.put_annotation("operation", "subscribe_newsletter")

    result = subscribe_newsletter(event, get_request_id(context))
    return to_api_response(result)
