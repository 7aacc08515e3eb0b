"""
Upstream request payloads.

These mirror the JSON bodies the third-party APIs expect. Required fields are
always filled from constants or validated input.
"""

from enum import Enum
from typing import Annotated, List, Optional

from pydantic import BaseModel, Field

ANONADDY_DOMAIN = 'anonaddy.com'
STORE_EMAIL_SUBSCRIPTION = 'SUBSCRIPTION_TYPE_EMAIL_STORE'


class AliasFormat(str, Enum):
    """Alias formats accepted by addy.io."""
    UUID = 'uuid'
    RANDOM_CHARACTERS = 'random_characters'
    CUSTOM = 'custom'
    RANDOM_WORDS = 'random_words'


class AliasPayload(BaseModel):
    """Body of ``POST {base_url}/aliases``."""

    domain: Annotated[str, Field(
        min_length=1,
        description='Domain the alias is created under'
    )] = ANONADDY_DOMAIN

    description: Annotated[Optional[str], Field(
        description='Free-text alias description'
    )] = None

    format: Annotated[AliasFormat, Field(
        description='Alias local-part generation scheme'
    )] = AliasFormat.RANDOM_CHARACTERS


class NewsletterCode(BaseModel):
    code: str


class NewsletterPayload(BaseModel):
    """Body of the newsletter subscription call."""

    email: Annotated[str, Field(min_length=1)]

    subscriptions: Annotated[List[str], Field(
        default_factory=lambda: [STORE_EMAIL_SUBSCRIPTION]
    )]

    newsletters: Annotated[List[NewsletterCode], Field(
        default_factory=lambda: [NewsletterCode(code=STORE_EMAIL_SUBSCRIPTION)]
    )]
