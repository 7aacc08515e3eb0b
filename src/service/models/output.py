"""
Output models for handler response bodies using Pydantic.

Field aliases carry the camelCase names the API Gateway clients expect;
serialize with ``model_dump(by_alias=True, exclude_none=True)``.
"""

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field


class HelloOutput(BaseModel):
    """Response body of the hello handler."""

    model_config = ConfigDict(populate_by_name=True)

    message: Annotated[str, Field(
        description='Greeting message',
        examples=['Hello from lambda']
    )]

    request_id: Annotated[str, Field(
        alias='requestId',
        description='Lambda request ID of the invocation'
    )]


class AliasCreatedOutput(BaseModel):
    """Response body after the alias provider created an alias."""

    model_config = ConfigDict(populate_by_name=True)

    message: Annotated[str, Field(
        description='Human-readable outcome',
        examples=['Alias created successfully']
    )]

    alias: Annotated[Any, Field(
        description='Alias provider response, passed through unchanged'
    )]

    request_id: Annotated[str, Field(
        alias='requestId',
        description='Lambda request ID of the invocation'
    )]


class NewsletterSubscribedOutput(BaseModel):
    """Response body after a successful newsletter subscription."""

    model_config = ConfigDict(populate_by_name=True)

    message: Annotated[str, Field(
        description='Human-readable outcome',
        examples=['Successfully subscribed to Auchan newsletter']
    )]

    email: Annotated[str, Field(
        description='Subscribed email address'
    )]

    auchan_response: Annotated[Any, Field(
        alias='auchanResponse',
        description='Newsletter provider response, passed through unchanged'
    )]

    request_id: Annotated[str, Field(
        alias='requestId',
        description='Lambda request ID of the invocation'
    )]


class BadRequestOutput(BaseModel):
    """Response body for a rejected inbound request."""

    error: Annotated[str, Field(
        description='What is wrong with the request',
        examples=['Alias is required', 'Invalid JSON in request body']
    )]


class ErrorOutput(BaseModel):
    """Response body for a failed upstream or internal operation."""

    model_config = ConfigDict(populate_by_name=True)

    error: Annotated[str, Field(
        description='Which operation failed',
        examples=['Failed to create alias']
    )]

    message: Annotated[str, Field(
        description='Error message of the underlying failure'
    )]

    details: Annotated[Any, Field(
        description='Upstream response body, when the upstream answered'
    )] = None

    request_id: Annotated[str, Field(
        alias='requestId',
        description='Lambda request ID for support and tracing'
    )]
