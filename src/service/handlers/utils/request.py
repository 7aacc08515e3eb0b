"""
Request adapter helpers.

API Gateway proxy events deliver the body as a JSON string (possibly base64
encoded); direct invocations and test consoles may pass it already decoded
or put the fields at the top level of the event.
"""

import base64
import binascii
import json
from typing import Any, Dict, Optional

from service.handlers.utils.errors import ValidationError

INVALID_JSON_MESSAGE = 'Invalid JSON in request body'
NOT_AN_OBJECT_MESSAGE = 'Request body must be a JSON object'


def parse_event_body(event: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Extract the request body of an event as a dict.

    Returns:
        The decoded body, or an empty dict when there is none

    Raises:
        ValidationError: If the body is not a JSON object
    """
    body = (event or {}).get('body')
    if body is None or body == '':
        return {}

    if isinstance(body, str):
        if (event or {}).get('isBase64Encoded'):
            try:
                body = base64.b64decode(body).decode('utf-8')
            except (binascii.Error, UnicodeDecodeError) as exc:
                raise ValidationError(INVALID_JSON_MESSAGE) from exc
        try:
            body = json.loads(body)
        except json.JSONDecodeError as exc:
            raise ValidationError(INVALID_JSON_MESSAGE) from exc

    if not isinstance(body, dict):
        raise ValidationError(NOT_AN_OBJECT_MESSAGE)
    return body


def get_request_id(context: Any) -> str:
    return getattr(context, 'aws_request_id', None) or 'unknown'
