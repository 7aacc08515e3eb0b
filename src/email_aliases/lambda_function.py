"""
Email Aliases Lambda Function - Entry point for alias creation.

POST body ``{"alias": "<name or email>"}``; creates an addy.io alias whose
description is the alias local part.
"""

from typing import Any, Dict

from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext

from service.handlers.aliases_handler import create_alias
from service.handlers.utils.observability import logger, metrics, tracer
from service.handlers.utils.request import get_request_id
from service.models.result import to_api_response


@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST, log_event=True)
@metrics.log_metrics(capture_cold_start_metric=True)
def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    Lambda function entry point for alias creation.

    Args:
        event: API Gateway proxy event
        context: Lambda context object

    Returns:
        API Gateway response dictionary
    """
    metrics.add_metric(name="RequestCount", unit=MetricUnit.Count, value=1)
    tracer.put_annotation("operation", "create_alias")

    result = create_alias(event, get_request_id(context))
    return to_api_response(result)
