"""Global test configuration and fixtures."""

import json
import os
import sys
from pathlib import Path
from typing import Any, Optional
from unittest.mock import Mock

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from awsmodels.config import ClientConfig
from awsmodels.protocol.request import HttpResponse


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Set up fake AWS credentials so nothing reaches a real account."""
    os.environ.update(
        {
            "AWS_DEFAULT_REGION": "us-east-1",
            "AWS_ACCESS_KEY_ID": "testing",
            "AWS_SECRET_ACCESS_KEY": "testing",
            "AWS_SECURITY_TOKEN": "testing",
            "AWS_SESSION_TOKEN": "testing",
        }
    )
    for name in [n for n in os.environ if n.startswith("AWSMODELS_")]:
        del os.environ[name]


@pytest.fixture
def raw_response():
    """Build a stand-in for botocore's AWSResponse."""

    def build(status_code: int = 200, body: bytes = b"", headers: Optional[dict[str, str]] = None) -> Mock:
        raw = Mock()
        raw.status_code = status_code
        raw.headers = headers or {}
        raw.content = body
        return raw

    return build


@pytest.fixture
def http_session(raw_response) -> Mock:
    """HTTP session whose ``send`` returns an empty 200 response unless reconfigured."""
    session = Mock()
    session.send.return_value = raw_response()
    return session


@pytest.fixture
def client_config() -> ClientConfig:
    return ClientConfig(region_name="us-east-1", max_attempts=3, retry_base_delay=0.1)


@pytest.fixture
def json_response():
    """Build a JSON HttpResponse from a python document."""

    def build(
        document: Any, status_code: int = 200, headers: Optional[dict[str, str]] = None
    ) -> HttpResponse:
        return HttpResponse(
            status_code=status_code,
            headers={"x-amzn-RequestId": "req-1234", **(headers or {})},
            body=json.dumps(document).encode("utf-8"),
        )

    return build
