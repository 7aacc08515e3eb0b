"""
Newsletter handler - subscribe an email address to the Auchan store newsletter.
"""

from typing import Any, Dict, Optional

from pydantic import ValidationError as PydanticValidationError

from service.dal import get_upstream_handler
from service.handlers.models.env_vars import get_auchan_env_vars
from service.handlers.utils.errors import ValidationError
from service.handlers.utils.observability import logger, tracer
from service.handlers.utils.request import parse_event_body
from service.handlers.utils.responses import handle_service_errors, success_result
from service.logic.newsletter_service import NewsletterService
from service.models.input import SubscribeNewsletterRequest
from service.models.output import NewsletterSubscribedOutput
from service.models.result import HandlerResult

EMAIL_REQUIRED_MESSAGE = 'Email is required'
EMAIL_NOT_STRING_MESSAGE = 'Email must be a string'
SUBSCRIBED_MESSAGE = 'Successfully subscribed to Auchan newsletter'
SUBSCRIBE_FAILED_LABEL = 'Failed to subscribe to Auchan newsletter'


def parse_subscribe_request(event: Dict[str, Any]) -> SubscribeNewsletterRequest:
    """
    Read ``email`` from the proxy body, or from the event itself for direct invocations.

    Raises:
        ValidationError: If ``email`` is missing, empty or not a string
    """
    source = parse_event_body(event) if 'body' in (event or {}) else (event or {})
    if source.get('email') in (None, ''):
        raise ValidationError(EMAIL_REQUIRED_MESSAGE)
    try:
        return SubscribeNewsletterRequest.model_validate(source)
    except PydanticValidationError as exc:
        raise ValidationError(EMAIL_NOT_STRING_MESSAGE) from exc


@tracer.capture_method
@handle_service_errors(SUBSCRIBE_FAILED_LABEL)
def subscribe_newsletter(
    event: Dict[str, Any],
    request_id: str,
    service: Optional[NewsletterService] = None,
) -> HandlerResult:
    request = parse_subscribe_request(event)

    service = service or NewsletterService(config=get_auchan_env_vars(), upstream=get_upstream_handler())
    auchan_response = service.subscribe(request.email)

    logger.info("Newsletter subscription accepted", extra={"request_id": request_id})
    return success_result(NewsletterSubscribedOutput(
        message=SUBSCRIBED_MESSAGE,
        email=request.email,
        auchan_response=auchan_response,
        request_id=request_id,
    ))
