"""
Handler result types.

Handlers never build the API Gateway envelope themselves. They return a
HandlerResult and the Lambda entry point turns it into the proxy response
with ``to_api_response``.
"""

import json
from typing import Any, Dict, Literal, Optional, Union

from pydantic import BaseModel

DEFAULT_HEADERS = {
    "Content-Type": "application/json",
}


class SuccessResult(BaseModel):
    """Handler completed and the upstream accepted the request."""

    kind: Literal['success'] = 'success'
    status_code: int = 200
    body: Dict[str, Any]

    @property
    def is_success(self) -> bool:
        return True


class ErrorResult(BaseModel):
    """Handler rejected the request or the upstream call failed."""

    kind: Literal['error'] = 'error'
    status_code: int
    body: Dict[str, Any]

    @property
    def is_success(self) -> bool:
        return False


HandlerResult = Union[SuccessResult, ErrorResult]


def to_api_response(
    result: HandlerResult,
    headers: Optional[Dict[str, str]] = None,
) -> Dict[str, Any]:
    """Translate a handler result into an API Gateway proxy response."""
    response_headers = dict(DEFAULT_HEADERS)
    if headers:
        response_headers.update(headers)

    return {
        "statusCode": result.status_code,
        "headers": response_headers,
        "body": json.dumps(result.body),
    }
