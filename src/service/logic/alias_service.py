"""
Business logic for alias creation through the addy.io API.
"""

from typing import Any, Dict, Optional

from service.dal import UpstreamApiHandler
from service.handlers.models.env_vars import AddyHandlerEnvVars
from service.handlers.utils.observability import logger, tracer
from service.logic.upstream import call_upstream
from service.models.payload import AliasFormat, AliasPayload

ADDY_SERVICE_NAME = 'addy.io'


def derive_description(alias: str) -> str:
    """Use only the local part when an email address was supplied as the alias."""
    if '@' in alias:
        return alias.split('@', 1)[0]
    return alias


def build_alias_payload(alias: Optional[str] = None) -> AliasPayload:
    """
    Build the alias creation payload.

    Args:
        alias: Validated alias input; when omitted the alias is generated
            without a description

    Returns:
        Payload for ``POST /aliases``
    """
    return AliasPayload(
        description=derive_description(alias) if alias is not None else None,
        format=AliasFormat.RANDOM_CHARACTERS,
    )


class AliasService:
    """Creates aliases at addy.io."""

    def __init__(self, config: AddyHandlerEnvVars, upstream: UpstreamApiHandler):
        self.config = config
        self.upstream = upstream

    def _headers(self) -> Dict[str, str]:
        return {
            'Authorization': f'Bearer {self.config.ADDY_API_KEY}',
            'Content-Type': 'application/json',
            'Accept': 'application/json',
        }

    @tracer.capture_method
    def create_alias(self, alias: Optional[str] = None) -> Any:
        """
        Create one alias.

        Raises:
            UpstreamServiceError: If the addy.io call fails
        """
        payload = build_alias_payload(alias)
        tracer.put_annotation("alias_format", payload.format.value)
        logger.debug('Alias payload built', extra={'has_description': payload.description is not None})

        return call_upstream(
            upstream=self.upstream,
            service_name=ADDY_SERVICE_NAME,
            url=self.config.aliases_url,
            payload=payload.model_dump(mode='json', exclude_none=True),
            headers=self._headers(),
        )
