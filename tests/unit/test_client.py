"""Unit tests for the service client."""

import json
import logging
from unittest.mock import Mock

import pytest
from botocore.exceptions import ConnectTimeoutError, EndpointConnectionError, HTTPClientError

from awsmodels.client import ServiceClient, create_client
from awsmodels.config import ClientConfig
from awsmodels.exceptions import SdkClientError
from awsmodels.log import ROOT_LOGGER_NAME
from awsmodels.services import ecs, s3
from awsmodels.services.ecs import ListTaskDefinitionFamiliesRequest
from awsmodels.services.s3 import GetObjectMetadataRequest

FAMILIES = json.dumps({"families": ["web"], "nextToken": None}).encode("utf-8")


def _throttled(raw_response):
    return raw_response(400, json.dumps({"__type": "ThrottlingException", "message": "Rate exceeded"}).encode())


@pytest.fixture
def sleep():
    return Mock()


@pytest.fixture
def ecs_client(client_config, http_session, sleep):
    return ServiceClient(ecs.SERVICE, config=client_config, http_session=http_session, sleep=sleep)


class TestServiceClientSetup:
    """Test endpoint and region resolution."""

    def test_default_endpoint(self, ecs_client):
        assert ecs_client.region_name == "us-east-1"
        assert ecs_client.endpoint == "https://ecs.us-east-1.amazonaws.com"

    def test_endpoint_override(self, http_session):
        config = ClientConfig(region_name="eu-west-1", endpoint_url="http://localhost:4566")

        client = ServiceClient(ecs.SERVICE, config=config, http_session=http_session)

        assert client.endpoint == "http://localhost:4566"
        assert client.region_name == "eu-west-1"

    def test_create_client(self, client_config, http_session):
        client = create_client("s3", config=client_config, http_session=http_session)

        assert client.service is s3.SERVICE

    def test_create_client_unknown_service(self, client_config):
        with pytest.raises(KeyError):
            create_client("sqs", config=client_config)

    def test_explicit_log_level_configures_logging(self, http_session):
        logger = logging.getLogger(ROOT_LOGGER_NAME)
        previous = logger.level
        try:
            ServiceClient(ecs.SERVICE, config=ClientConfig(log_level="debug"), http_session=http_session)

            assert logger.level == logging.DEBUG
        finally:
            logger.setLevel(previous)


class TestInvoke:
    """Test sending requests and reading responses."""

    def test_signed_request_is_sent(self, ecs_client, http_session, raw_response):
        http_session.send.return_value = raw_response(200, FAMILIES, {"x-amzn-RequestId": "r-1"})

        result = ecs_client.invoke(ListTaskDefinitionFamiliesRequest(family_prefix="web"))

        assert result.families == ["web"]
        assert result.response_metadata.request_id == "r-1"
        prepared = http_session.send.call_args.args[0]
        assert prepared.method == "POST"
        assert prepared.url == "https://ecs.us-east-1.amazonaws.com/"
        assert prepared.headers["X-Amz-Target"] == "AmazonEC2ContainerServiceV20141113.ListTaskDefinitionFamilies"
        assert "Credential=testing/" in prepared.headers["Authorization"]
        assert "/us-east-1/ecs/aws4_request" in prepared.headers["Authorization"]
        assert json.loads(prepared.body) == {"familyPrefix": "web"}

    def test_snake_case_operation_methods(self, ecs_client, http_session, raw_response):
        http_session.send.return_value = raw_response(200, FAMILIES)

        result = ecs_client.list_task_definition_families(family_prefix="web", max_results=10)

        assert result.families == ["web"]
        body = json.loads(http_session.send.call_args.args[0].body)
        assert body == {"familyPrefix": "web", "maxResults": 10}

    def test_unknown_operation_method(self, ecs_client):
        with pytest.raises(AttributeError, match="has no operation 'describe_clusters'"):
            ecs_client.describe_clusters()

    def test_s3_head_object(self, client_config, http_session, raw_response):
        http_session.send.return_value = raw_response(
            200, b"", {"Content-Length": "12", "x-amz-meta-owner": "alice"}
        )
        client = ServiceClient(s3.SERVICE, config=client_config, http_session=http_session)

        metadata = client.get_object_metadata(bucket_name="my-bucket", key="a/b.txt")

        assert metadata.content_length == 12
        assert metadata.user_metadata == {"owner": "alice"}
        prepared = http_session.send.call_args.args[0]
        assert prepared.method == "HEAD"
        assert prepared.url == "https://s3.us-east-1.amazonaws.com/my-bucket/a/b.txt"
        assert "X-Amz-Content-SHA256" in prepared.headers

    def test_missing_credentials(self, client_config, http_session):
        session = Mock()
        session.get_credentials.return_value = None

        client = ServiceClient(ecs.SERVICE, config=client_config, session=session, http_session=http_session)

        with pytest.raises(SdkClientError, match="Unable to locate credentials"):
            client.invoke(ListTaskDefinitionFamiliesRequest())
        http_session.send.assert_not_called()


class TestRetries:
    """Test retry and backoff behaviour."""

    def test_server_error_is_retried(self, ecs_client, http_session, raw_response, sleep):
        http_session.send.side_effect = [raw_response(500), raw_response(200, FAMILIES)]

        result = ecs_client.invoke(ListTaskDefinitionFamiliesRequest())

        assert result.families == ["web"]
        assert http_session.send.call_count == 2
        sleep.assert_called_once_with(0.1)

    def test_throttling_gives_up_after_max_attempts(self, ecs_client, http_session, raw_response, sleep):
        http_session.send.side_effect = [_throttled(raw_response) for _ in range(3)]

        with pytest.raises(ecs.AmazonECSException) as exc_info:
            ecs_client.invoke(ListTaskDefinitionFamiliesRequest())

        assert exc_info.value.error_code == "ThrottlingException"
        assert http_session.send.call_count == 3
        assert [c.args[0] for c in sleep.call_args_list] == [0.1, 0.2]

    def test_client_error_is_not_retried(self, ecs_client, http_session, raw_response, sleep):
        http_session.send.return_value = raw_response(
            400, json.dumps({"__type": "InvalidParameterException", "message": "bad prefix"}).encode()
        )

        with pytest.raises(ecs.InvalidParameterException, match="bad prefix"):
            ecs_client.invoke(ListTaskDefinitionFamiliesRequest(family_prefix="!"))

        assert http_session.send.call_count == 1
        sleep.assert_not_called()

    def test_transport_error(self, ecs_client, http_session, sleep):
        http_session.send.side_effect = HTTPClientError(error=ConnectionResetError("reset"))

        with pytest.raises(SdkClientError, match="Unable to execute HTTP request") as exc_info:
            ecs_client.invoke(ListTaskDefinitionFamiliesRequest())

        assert exc_info.value.details == {"operation": "ListTaskDefinitionFamilies", "attempts": 3}
        assert sleep.call_count == 2

    @pytest.mark.parametrize("error_class", [EndpointConnectionError, ConnectTimeoutError])
    def test_connection_failures_are_retried(self, ecs_client, http_session, sleep, error_class):
        """Test that DNS failures, refused connections and connect timeouts are retried."""
        http_session.send.side_effect = error_class(endpoint_url="https://ecs.us-east-1.amazonaws.com")

        with pytest.raises(SdkClientError, match="Unable to execute HTTP request") as exc_info:
            ecs_client.invoke(ListTaskDefinitionFamiliesRequest())

        assert isinstance(exc_info.value.__cause__, error_class)
        assert http_session.send.call_count == 3
        assert sleep.call_count == 2

    def test_connection_failure_then_success(self, ecs_client, http_session, raw_response, sleep):
        http_session.send.side_effect = [
            EndpointConnectionError(endpoint_url="https://ecs.us-east-1.amazonaws.com"),
            raw_response(200, FAMILIES),
        ]

        result = ecs_client.invoke(ListTaskDefinitionFamiliesRequest())

        assert result.families == ["web"]
        sleep.assert_called_once_with(0.1)

    def test_head_not_found_is_not_retried(self, client_config, http_session, raw_response, sleep):
        http_session.send.return_value = raw_response(404)
        client = ServiceClient(s3.SERVICE, config=client_config, http_session=http_session, sleep=sleep)

        with pytest.raises(s3.AmazonS3Exception) as exc_info:
            client.invoke(GetObjectMetadataRequest(bucket_name="b", key="missing"))

        assert exc_info.value.error_code == "404"
        sleep.assert_not_called()

    def test_backoff_delay_is_capped(self, http_session):
        config = ClientConfig(retry_base_delay=0.1, retry_max_delay=0.5)
        client = ServiceClient(ecs.SERVICE, config=config, http_session=http_session)

        assert [client.backoff_delay(n) for n in range(1, 5)] == [0.1, 0.2, 0.4, 0.5]

    @pytest.mark.parametrize(
        "code,status,expected",
        [
            ("ThrottlingException", 400, True),
            ("SlowDown", 503, True),
            ("InternalFailure", 500, True),
            ("TooManyRequests", 429, True),
            ("ValidationException", 400, False),
            ("LimitExceededException", 400, False),
        ],
    )
    def test_is_retryable(self, code, status, expected):
        error = ecs.AmazonECSException("x", error_code=code, status_code=status)

        assert ServiceClient.is_retryable(error) is expected
