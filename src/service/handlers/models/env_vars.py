"""
Environment variable models for type-safe configuration.

Each handler reads its credentials and upstream URLs once per cold start
through these models; the parsed instance is then passed explicitly into the
service layer instead of being read from os.environ at call sites.

Logging settings (``LOG_LEVEL``, ``POWERTOOLS_SERVICE_NAME``) are read by
Powertools itself and are not validated here.
"""

from typing import Annotated

from aws_lambda_env_modeler import get_environment_variables
from pydantic import BaseModel, Field, HttpUrl

ADDY_DEFAULT_BASE_URL = 'https://app.addy.io/api/v1'


class AddyHandlerEnvVars(BaseModel):
    """Environment variables for the addy.io alias handlers."""

    ADDY_API_KEY: Annotated[str, Field(
        description='Bearer token for the addy.io API',
        min_length=1
    )]

    BASE_URL: Annotated[HttpUrl, Field(
        description='Base URL of the addy.io API, without trailing /aliases'
    )] = ADDY_DEFAULT_BASE_URL

    @property
    def aliases_url(self) -> str:
        """Full URL of the alias creation resource."""
        return f"{str(self.BASE_URL).rstrip('/')}/aliases"


class AuchanHandlerEnvVars(BaseModel):
    """Environment variables for the Auchan newsletter handler."""

    AUCHAN_API_URL: Annotated[HttpUrl, Field(
        description='Newsletter subscription endpoint'
    )]

    AUCHAN_API_KEY: Annotated[str, Field(
        description='Gravitee API key for the Auchan API',
        min_length=1
    )]


def get_addy_env_vars() -> AddyHandlerEnvVars:
    """Get validated addy.io settings (cached after the first call)."""
    return get_environment_variables(model=AddyHandlerEnvVars)


def get_auchan_env_vars() -> AuchanHandlerEnvVars:
    """Get validated Auchan settings (cached after the first call)."""
    return get_environment_variables(model=AuchanHandlerEnvVars)
