"""
Business logic for the Auchan newsletter subscription.
"""

from typing import Any, Dict

from service.dal import UpstreamApiHandler
from service.handlers.models.env_vars import AuchanHandlerEnvVars
from service.handlers.utils.observability import tracer
from service.logic.upstream import call_upstream
from service.models.payload import NewsletterPayload

AUCHAN_SERVICE_NAME = 'Auchan'


def build_newsletter_payload(email: str) -> NewsletterPayload:
    """Subscribe ``email`` to the store email newsletter."""
    return NewsletterPayload(email=email)


class NewsletterService:
    """Subscribes email addresses through the Auchan Gravitee gateway."""

    def __init__(self, config: AuchanHandlerEnvVars, upstream: UpstreamApiHandler):
        self.config = config
        self.upstream = upstream

    def _headers(self) -> Dict[str, str]:
        return {
            'X-Gravitee-Api-Key': self.config.AUCHAN_API_KEY,
            'Content-Type': 'application/json',
            'Accept': 'application/json',
        }

    @tracer.capture_method
    def subscribe(self, email: str) -> Any:
        payload = build_newsletter_payload(email)

        return call_upstream(
            upstream=self.upstream,
            service_name=AUCHAN_SERVICE_NAME,
            url=str(self.config.AUCHAN_API_URL),
            payload=payload.model_dump(mode='json'),
            headers=self._headers(),
        )
