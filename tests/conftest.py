"""
Pytest configuration and shared fixtures for the upstream proxy handlers.

This module provides common test fixtures and configuration used across
unit, integration, and end-to-end tests.
"""

import json
import os
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple

import httpx
import pytest

os.environ.setdefault("LAMBDA_ENV_MODELER_DISABLE_CACHE", "true")

from service.handlers.models.env_vars import AddyHandlerEnvVars, AuchanHandlerEnvVars  # noqa: E402

ADDY_BASE_URL = "https://addy.test/api/v1"
ADDY_ALIASES_URL = f"{ADDY_BASE_URL}/aliases"
AUCHAN_API_URL = "https://auchan.test/loyalty/v1/newsletter/subscriptions"

TEST_ENVIRONMENT = {
    "AWS_DEFAULT_REGION": "eu-west-1",
    "ADDY_API_KEY": "test-addy-key",
    "BASE_URL": ADDY_BASE_URL,
    "AUCHAN_API_URL": AUCHAN_API_URL,
    "AUCHAN_API_KEY": "test-auchan-key",
    "POWERTOOLS_SERVICE_NAME": "test-upstream-proxy",
    "POWERTOOLS_METRICS_NAMESPACE": "TestUpstreamProxy",
    "LOG_LEVEL": "DEBUG",
    "POWERTOOLS_TRACE_DISABLED": "true",  # Disable X-Ray in tests
    "LAMBDA_ENV_MODELER_DISABLE_CACHE": "true",  # Re-read configuration per invocation
}


# Test environment configuration
@pytest.fixture(scope="session", autouse=True)
def test_environment():
    """Set up test environment variables."""
    os.environ.update(TEST_ENVIRONMENT)


@dataclass
class FakeLambdaContext:
    function_name: str = "test-lambda-function"
    function_version: str = "$LATEST"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = "arn:aws:lambda:eu-west-1:123456789012:function:test-lambda-function"
    aws_request_id: str = "test-request-id-123"
    log_group_name: str = "/aws/lambda/test-lambda-function"
    log_stream_name: str = "2024/01/01/[$LATEST]test123"

    def get_remaining_time_in_millis(self) -> int:
        return 30000


@pytest.fixture
def lambda_context() -> FakeLambdaContext:
    """Create a Lambda context for testing."""
    return FakeLambdaContext()


@pytest.fixture
def api_gateway_event() -> Callable[..., Dict[str, Any]]:
    """Factory for API Gateway proxy events with a JSON body."""

    def make_event(body: Any = None, path: str = "/aliases", raw_body: Optional[str] = None) -> Dict[str, Any]:
        if raw_body is None and body is not None:
            raw_body = json.dumps(body)
        return {
            "resource": path,
            "path": path,
            "httpMethod": "POST",
            "headers": {
                "Content-Type": "application/json",
                "User-Agent": "test-agent/1.0",
            },
            "body": raw_body,
            "requestContext": {
                "requestId": "apigw-request-id-456",
                "accountId": "123456789012",
                "stage": "test",
                "httpMethod": "POST",
                "path": path,
                "identity": {
                    "sourceIp": "127.0.0.1",
                    "userAgent": "test-agent/1.0",
                },
            },
            "pathParameters": None,
            "queryStringParameters": None,
            "isBase64Encoded": False,
        }

    return make_event


@pytest.fixture
def addy_config() -> AddyHandlerEnvVars:
    return AddyHandlerEnvVars(ADDY_API_KEY="test-addy-key", BASE_URL=ADDY_BASE_URL)


@pytest.fixture
def auchan_config() -> AuchanHandlerEnvVars:
    return AuchanHandlerEnvVars(AUCHAN_API_URL=AUCHAN_API_URL, AUCHAN_API_KEY="test-auchan-key")


class RecordingUpstream:
    """UpstreamApiHandler double that records calls and replays a canned outcome."""

    def __init__(self, response: Any = None, error: Optional[Exception] = None) -> None:
        self.response = response
        self.error = error
        self.calls: List[Tuple[str, Dict[str, Any], Dict[str, str]]] = []

    def post_json(self, url: str, payload: Dict[str, Any], headers: Dict[str, str]) -> Any:
        self.calls.append((url, payload, headers))
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def recording_upstream() -> Callable[..., RecordingUpstream]:
    return RecordingUpstream


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")
    config.addinivalue_line("markers", "e2e: End-to-end tests")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        # Add markers based on test location
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
        elif "e2e" in str(item.fspath):
            item.add_marker(pytest.mark.e2e)


# End-to-end test fixtures
@pytest.fixture
def integration_client():
    """HTTP client for a deployed stage; skips when API_BASE_URL is unset."""
    base_url = os.environ.get("API_BASE_URL")
    if not base_url:
        pytest.skip("API_BASE_URL not set")

    with httpx.Client(base_url=base_url, timeout=30.0) as client:
        yield client
