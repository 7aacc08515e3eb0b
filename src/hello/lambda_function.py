import json
from typing import Any, Dict

from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.utilities.typing import LambdaContext

from service.handlers.utils.observability import logger, metrics, tracer
from service.models.output import HelloOutput
from service.models.result import SuccessResult, to_api_response

HELLO_MESSAGE = "Hello from lambda"


@metrics.log_metrics(capture_cold_start_metric=True)
@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST)
def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    Hello Lambda function handler.

    Args:
        event: Lambda event payload
        context: Lambda context object

    Returns:
        API Gateway response
    """
    logger.info("Event received", extra={"event": json.dumps(event, default=str)})
    logger.info(
        "Lambda context",
        extra={
            "request_id": context.aws_request_id,
            "function_name": context.function_name,
            "function_version": getattr(context, "function_version", None),
        },
    )

    body = HelloOutput(message=HELLO_MESSAGE, request_id=context.aws_request_id)
    return to_api_response(SuccessResult(body=body.model_dump(by_alias=True)))
