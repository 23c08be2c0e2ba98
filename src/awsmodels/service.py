"""Declarative description of a service API: protocol, operations and errors."""

import re
from dataclasses import dataclass, field
from typing import Optional

from botocore.exceptions import ClientError

from awsmodels.exceptions import ServiceError
from awsmodels.model.base import AwsRequest, AwsResult
from awsmodels.protocol import (
    ErrorHandler,
    RequestMarshaller,
    ResponseHandler,
    create_error_handler,
    create_marshaller,
    create_response_handler,
)
from awsmodels.protocol.request import HttpMethod


def to_snake_case(name: str) -> str:
    """``DescribeVTLDevices`` -> ``describe_vtl_devices``."""
    name = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1_\2", name)
    return re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", name).lower()


@dataclass(frozen=True)
class OperationModel:
    name: str
    input_shape: type[AwsRequest]
    output_shape: Optional[type[AwsResult]] = None
    http_method: str = HttpMethod.POST
    request_uri: str = "/"
    result_wrapper: Optional[str] = None
    marshaller_class: Optional[type[RequestMarshaller]] = None

    @property
    def python_name(self) -> str:
        return to_snake_case(self.name)


@dataclass(frozen=True)
class ServiceModel:
    """
    Everything needed to talk to one service.

    Attributes:
        name: Short identifier, also the registry key (``config``, ``ecs``)
        service_name: Name recorded on requests and errors (``AmazonConfig``)
        endpoint_prefix: Host prefix of the regional endpoint
        signing_name: SigV4 service name
        api_version: API version string
        protocol: One of json, rest-json, rest-xml, query
        base_exception: Raised for error codes with no dedicated class
        target_prefix: ``X-Amz-Target`` prefix for the json protocol
        json_version: Suffix of the ``application/x-amz-json-`` content type
        signature_version: ``v4`` or ``s3v4``
        operations: Operations of the service
        exceptions: Typed errors, matched on their wire code
    """

    name: str
    service_name: str
    endpoint_prefix: str
    signing_name: str
    api_version: str
    protocol: str
    base_exception: type[ServiceError] = ServiceError
    target_prefix: Optional[str] = None
    json_version: str = "1.1"
    signature_version: str = "v4"
    operations: tuple[OperationModel, ...] = ()
    exceptions: tuple[type[ServiceError], ...] = ()
    _exceptions_by_code: dict[str, type[ServiceError]] = field(
        default_factory=dict, compare=False, repr=False
    )

    def __post_init__(self) -> None:
        self._exceptions_by_code.update({cls.wire_code(): cls for cls in self.exceptions})

    def operation(self, name: str) -> OperationModel:
        """
        Look up an operation by API name or python name.

        Raises:
            KeyError: If the service has no such operation
        """
        for operation in self.operations:
            if name in (operation.name, operation.python_name):
                return operation
        raise KeyError(f"{self.name} has no operation '{name}'")

    def operation_for_request(self, request_obj: AwsRequest) -> OperationModel:
        for operation in self.operations:
            if type(request_obj) is operation.input_shape:
                return operation
        raise KeyError(f"{type(request_obj).__name__} is not an input of {self.name}")

    def exception_class_for(self, error_code: str) -> type[ServiceError]:
        return self._exceptions_by_code.get(error_code, self.base_exception)

    def create_marshaller(self, operation: OperationModel) -> RequestMarshaller:
        return create_marshaller(self, operation)

    def create_response_handler(self, operation: OperationModel) -> ResponseHandler:
        return create_response_handler(self, operation)

    def create_error_handler(self) -> ErrorHandler:
        return create_error_handler(self)

    def translate_client_error(self, error: ClientError) -> ServiceError:
        """Map an error raised by a boto3 client for this service to its typed exception."""
        return self.base_exception.from_client_error(error, self.exceptions, self.service_name)

    def endpoint_for(self, region_name: str) -> str:
        suffix = "amazonaws.com.cn" if region_name.startswith("cn-") else "amazonaws.com"
        return f"https://{self.endpoint_prefix}.{region_name}.{suffix}"
