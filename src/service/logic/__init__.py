"""
Business Logic Layer Module.

Payload builders and the single upstream call for each third-party API.
Services receive their configuration and upstream handler explicitly.
"""

from service.logic.alias_service import AliasService, build_alias_payload, derive_description
from service.logic.newsletter_service import NewsletterService, build_newsletter_payload

__all__ = [
    "AliasService",
    "NewsletterService",
    "build_alias_payload",
    "build_newsletter_payload",
    "derive_description",
]
