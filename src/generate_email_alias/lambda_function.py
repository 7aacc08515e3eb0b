"""
Generate Email Alias Lambda Function - Entry point for random alias generation.

Takes no input; every invocation creates a new random addy.io alias.
"""

from typing import Any, Dict

from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext

from service.handlers.aliases_handler import generate_alias
from service.handlers.utils.observability import logger, metrics, tracer
from service.handlers.utils.request import get_request_id
from service.models.result import to_api_response


@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST, log_event=True)
@metrics.log_metrics(capture_cold_start_metric=True)
def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    metrics.add_metric(name="RequestCount", unit=MetricUnit.Count, value=1)
    tracer.put_annotation("operation", "generate_alias")

    result = generate_alias(event, get_request_id(context))
    return to_api_response(result)
