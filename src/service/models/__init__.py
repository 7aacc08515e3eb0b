"""
Service Models Package

Pydantic models for inbound requests, upstream payloads, response bodies
and handler results.
"""

from .input import CreateAliasRequest, SubscribeNewsletterRequest
from .output import (
    AliasCreatedOutput,
    BadRequestOutput,
    ErrorOutput,
    HelloOutput,
    NewsletterSubscribedOutput,
)
from .payload import AliasFormat, AliasPayload, NewsletterCode, NewsletterPayload
from .result import ErrorResult, HandlerResult, SuccessResult, to_api_response

__all__ = [
    # Input models
    "CreateAliasRequest",
    "SubscribeNewsletterRequest",

    # Upstream payloads
    "AliasFormat",
    "AliasPayload",
    "NewsletterCode",
    "NewsletterPayload",

    # Output models
    "AliasCreatedOutput",
    "BadRequestOutput",
    "ErrorOutput",
    "HelloOutput",
    "NewsletterSubscribedOutput",

    # Results
    "ErrorResult",
    "HandlerResult",
    "SuccessResult",
    "to_api_response",
]
