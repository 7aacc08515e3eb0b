"""
Input models for request validation using Pydantic.

Only presence of the required field is checked; format, length and domain
are left to the upstream APIs.
"""

from typing import Annotated

from pydantic import BaseModel, Field


class CreateAliasRequest(BaseModel):
    """Request body for the alias-with-description handler."""

    alias: Annotated[str, Field(
        min_length=1,
        description='Alias name or email address used to derive the alias description',
        examples=['jane', 'jane@example.com']
    )]


class SubscribeNewsletterRequest(BaseModel):
    """Request body for the newsletter subscription handler."""

    email: Annotated[str, Field(
        min_length=1,
        description='Email address to subscribe',
        examples=['jane@example.com']
    )]
