"""HTTP client that sends marshalled requests to a service endpoint."""

import time
from typing import Any, Callable, Optional

import boto3
from botocore.auth import S3SigV4Auth, SigV4Auth
from botocore.exceptions import ConnectionError as BotocoreConnectionError
from botocore.exceptions import HTTPClientError
from botocore.httpsession import URLLib3Session

from awsmodels.config import ClientConfig
from awsmodels.exceptions import SdkClientError, ServiceError
from awsmodels.log import configure_logging, get_logger
from awsmodels.model.base import AwsRequest, AwsResult
from awsmodels.protocol.base import coerce_headers
from awsmodels.protocol.request import HttpResponse, Request
from awsmodels.service import OperationModel, ServiceModel
from awsmodels.services import get_service

logger = get_logger(__name__)

DEFAULT_REGION = "us-east-1"

# EndpointConnectionError and ConnectTimeoutError derive from ConnectionError
TRANSPORT_ERRORS = (HTTPClientError, BotocoreConnectionError)

THROTTLING_ERROR_CODES = frozenset(
    {
        "Throttling",
        "ThrottlingException",
        "ThrottledException",
        "RequestThrottledException",
        "TooManyRequestsException",
        "ProvisionedThroughputExceededException",
        "RequestLimitExceeded",
        "BandwidthLimitExceeded",
        "SlowDown",
        "PriorRequestNotComplete",
    }
)


class ServiceClient:
    """
    Sends requests for one service.

    Credentials and the default region come from a boto3 session; requests
    are signed with SigV4 and sent through botocore's urllib3 session.
    Operations can be called through ``invoke`` or as snake_case methods::

        client = create_client("ecs")
        result = client.list_task_definition_families(family_prefix="web")
    """

    def __init__(
        self,
        service: ServiceModel,
        config: Optional[ClientConfig] = None,
        session: Optional[boto3.Session] = None,
        http_session: Optional[Any] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """
        Args:
            service: Description of the target service
            config: Client settings, read from the environment when omitted
            session: boto3 session providing credentials
            http_session: Object with a botocore-style ``send(prepared_request)``
            sleep: Function used to wait between attempts
        """
        self.service = service
        self.config = config or ClientConfig.from_env()
        if "log_level" in self.config.model_fields_set:
            configure_logging(self.config.log_level)

        self.session = session or boto3.Session(
            region_name=self.config.region_name, profile_name=self.config.profile_name
        )
        self.region_name = self.config.region_name or self.session.region_name or DEFAULT_REGION
        self.endpoint = self.config.endpoint_url or service.endpoint_for(self.region_name)
        self._http = http_session or URLLib3Session(
            verify=self.config.verify,
            timeout=(self.config.connect_timeout, self.config.read_timeout),
            max_pool_connections=self.config.max_pool_connections,
        )
        self._sleep = sleep

        logger.debug(
            "Client for %s initialized with endpoint: %s, region: %s, max attempts: %d",
            service.name,
            self.endpoint,
            self.region_name,
            self.config.max_attempts,
        )

    def invoke(self, request_obj: AwsRequest) -> Optional[AwsResult]:
        """
        Execute the operation whose input is ``request_obj``.

        Returns:
            The operation output, or ``None`` for operations without one

        Raises:
            MarshallingError: If the request cannot be encoded
            ServiceError: The typed error reported by the service
            SdkClientError: If the request could not be sent
        """
        operation = self.service.operation_for_request(request_obj)
        request = self.service.create_marshaller(operation).marshall(request_obj)
        response = self._execute(operation, request)
        return self.service.create_response_handler(operation).handle(response)

    def _execute(self, operation: OperationModel, request: Request) -> HttpResponse:
        max_attempts = self.config.max_attempts
        for attempt in range(1, max_attempts + 1):
            try:
                response = self._send(request)
            except TRANSPORT_ERRORS as e:
                if attempt >= max_attempts:
                    raise SdkClientError(
                        f"Unable to execute HTTP request: {e}",
                        {"operation": operation.name, "attempts": attempt},
                    ) from e
                self._backoff(operation, attempt, e)
                continue

            if 200 <= response.status_code < 300:
                return response

            error = self.service.create_error_handler().handle(response)
            if attempt >= max_attempts or not self.is_retryable(error):
                raise error
            self._backoff(operation, attempt, error)

        raise AssertionError("unreachable")

    def _send(self, request: Request) -> HttpResponse:
        aws_request = request.to_aws_request(self.endpoint)
        self._sign(aws_request)
        raw = self._http.send(aws_request.prepare())
        return HttpResponse(
            status_code=raw.status_code,
            headers=coerce_headers(raw.headers),
            body=raw.content or b"",
        )

    def _sign(self, aws_request: Any) -> None:
        credentials = self.session.get_credentials()
        if credentials is None:
            raise SdkClientError("Unable to locate credentials")
        signer_class = S3SigV4Auth if self.service.signature_version == "s3v4" else SigV4Auth
        signer_class(
            credentials.get_frozen_credentials(), self.service.signing_name, self.region_name
        ).add_auth(aws_request)

    @staticmethod
    def is_retryable(error: ServiceError) -> bool:
        if error.error_code in THROTTLING_ERROR_CODES:
            return True
        return error.status_code is not None and (
            error.status_code >= 500 or error.status_code == 429
        )

    def backoff_delay(self, attempt: int) -> float:
        """Delay before retrying after ``attempt`` failed attempts."""
        return min(self.config.retry_max_delay, self.config.retry_base_delay * (2 ** (attempt - 1)))

    def _backoff(self, operation: OperationModel, attempt: int, cause: Exception) -> None:
        delay = self.backoff_delay(attempt)
        logger.warning(
            "Retrying %s.%s after attempt %d of %d failed (%s), sleeping %.2fs",
            self.service.name,
            operation.name,
            attempt,
            self.config.max_attempts,
            cause,
            delay,
        )
        self._sleep(delay)

    def __getattr__(self, name: str) -> Callable[..., Optional[AwsResult]]:
        service = self.__dict__.get("service")
        if name.startswith("_") or service is None:
            raise AttributeError(name)
        try:
            operation = service.operation(name)
        except KeyError:
            raise AttributeError(
                f"'{type(self).__name__}' for {self.service.name} has no operation '{name}'"
            ) from None

        def call(request_obj: Optional[AwsRequest] = None, **fields: Any) -> Optional[AwsResult]:
            if request_obj is None:
                request_obj = operation.input_shape(**fields)
            return self.invoke(request_obj)

        call.__name__ = operation.python_name
        call.__doc__ = f"Invoke {self.service.name} {operation.name}."
        return call


def create_client(service_name: str, config: Optional[ClientConfig] = None, **kwargs: Any) -> ServiceClient:
    """Create a client for a registered service, e.g. ``create_client("rds")``."""
    return ServiceClient(get_service(service_name), config=config, **kwargs)
