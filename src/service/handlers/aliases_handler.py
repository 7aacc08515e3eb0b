"""
Alias handlers - create an addy.io alias with or without a description.

Each core follows the same sequence: validate the request, build the payload,
call addy.io once, map the outcome to a HandlerResult.
"""

from typing import Any, Dict, Optional

from pydantic import ValidationError as PydanticValidationError

from service.dal import get_upstream_handler
from service.handlers.models.env_vars import get_addy_env_vars
from service.handlers.utils.errors import ValidationError
from service.handlers.utils.observability import logger, tracer
from service.handlers.utils.request import parse_event_body
from service.handlers.utils.responses import handle_service_errors, success_result
from service.logic.alias_service import AliasService
from service.models.input import CreateAliasRequest
from service.models.output import AliasCreatedOutput
from service.models.result import HandlerResult

ALIAS_REQUIRED_MESSAGE = 'Alias is required'
ALIAS_NOT_STRING_MESSAGE = 'Alias must be a string'
ALIAS_CREATED_MESSAGE = 'Alias created successfully'
ALIAS_FAILED_LABEL = 'Failed to create alias'


def parse_create_alias_request(event: Dict[str, Any]) -> CreateAliasRequest:
    """
    Raises:
        ValidationError: If ``alias`` is missing, empty or not a string
    """
    body = parse_event_body(event)
    if body.get('alias') in (None, ''):
        raise ValidationError(ALIAS_REQUIRED_MESSAGE)
    try:
        return CreateAliasRequest.model_validate(body)
    except PydanticValidationError as exc:
        raise ValidationError(ALIAS_NOT_STRING_MESSAGE) from exc


def build_alias_service() -> AliasService:
    return AliasService(config=get_addy_env_vars(), upstream=get_upstream_handler())


@tracer.capture_method
@handle_service_errors(ALIAS_FAILED_LABEL)
def create_alias(
    event: Dict[str, Any],
    request_id: str,
    service: Optional[AliasService] = None,
) -> HandlerResult:
    """Create an alias whose description is derived from the ``alias`` field."""
    request = parse_create_alias_request(event)

    service = service or build_alias_service()
    alias = service.create_alias(request.alias)

    logger.info("Alias created", extra={"request_id": request_id})
    return success_result(AliasCreatedOutput(
        message=ALIAS_CREATED_MESSAGE,
        alias=alias,
        request_id=request_id,
    ))


@tracer.capture_method
@handle_service_errors(ALIAS_FAILED_LABEL)
def generate_alias(
    event: Dict[str, Any],
    request_id: str,
    service: Optional[AliasService] = None,
) -> HandlerResult:
    """Generate a random alias; the event carries no required input."""
    service = service or build_alias_service()
    alias = service.create_alias()

    logger.info("Alias generated", extra={"request_id": request_id})
    return success_result(AliasCreatedOutput(
        message=ALIAS_CREATED_MESSAGE,
        alias=alias,
        request_id=request_id,
    ))
