"""Interfaces implemented by every wire protocol."""

from abc import ABC, abstractmethod
from http import HTTPStatus
from typing import TYPE_CHECKING, Any, Optional

from awsmodels.exceptions import MarshallingError, ServiceError
from awsmodels.model.base import AwsRequest, AwsResult, ResponseMetadata
from awsmodels.protocol.request import HttpResponse, Request

if TYPE_CHECKING:
    from awsmodels.service import OperationModel, ServiceModel


class RequestMarshaller(ABC):
    """Converts an operation input into an HTTP request."""

    def __init__(self, service: "ServiceModel", operation: "OperationModel") -> None:
        self.service = service
        self.operation = operation

    def marshall(self, request_obj: Optional[AwsRequest]) -> Request:
        """
        Build the HTTP request for ``request_obj``.

        Raises:
            MarshallingError: If the argument is missing or cannot be encoded
        """
        if request_obj is None:
            raise MarshallingError("Invalid argument passed to marshall(...)")
        if not isinstance(request_obj, self.operation.input_shape):
            raise MarshallingError(
                f"Expected {self.operation.input_shape.__name__} for {self.operation.name}, "
                f"got {type(request_obj).__name__}"
            )
        request = Request(
            service_name=self.service.service_name,
            original_request=request_obj,
            http_method=self.operation.http_method,
        )
        self._marshall_into(request, request_obj)
        for name, value in request_obj.custom_request_headers.items():
            request.add_header(name, value)
        return request

    @abstractmethod
    def _marshall_into(self, request: Request, request_obj: AwsRequest) -> None:
        """Fill in path, parameters, headers and content."""


class ResponseHandler(ABC):
    """Converts a successful HTTP response into an operation output."""

    def __init__(self, service: "ServiceModel", operation: "OperationModel") -> None:
        self.service = service
        self.operation = operation

    def handle(self, response: HttpResponse) -> Optional[AwsResult]:
        output_shape = self.operation.output_shape
        if output_shape is None:
            return None
        result = self._unmarshall(response, output_shape)
        if result is None:
            result = output_shape()
        if result.response_metadata is None:
            result.set_response_metadata(response_metadata(response))
        return result

    @abstractmethod
    def _unmarshall(self, response: HttpResponse, output_shape: type[AwsResult]) -> Optional[AwsResult]:
        """Read the output shape from the response."""


class ErrorHandler(ABC):
    """Converts an error HTTP response into a typed service exception."""

    def __init__(self, service: "ServiceModel") -> None:
        self.service = service

    def handle(self, response: HttpResponse) -> ServiceError:
        code, message, request_id = self._parse(response)
        if not code:
            code = str(response.status_code)
        if message is None:
            message = status_phrase(response.status_code)
        exception_class = self.service.exception_class_for(code)
        return exception_class(
            message,
            error_code=code,
            status_code=response.status_code,
            request_id=request_id or response.request_id,
            service_name=self.service.service_name,
        )

    @abstractmethod
    def _parse(self, response: HttpResponse) -> tuple[Optional[str], Optional[str], Optional[str]]:
        """Return ``(code, message, request_id)`` read from the response."""


def response_metadata(response: HttpResponse, request_id: Optional[str] = None) -> ResponseMetadata:
    return ResponseMetadata(
        request_id=request_id or response.request_id,
        http_status_code=response.status_code,
        http_headers=dict(response.headers),
    )


def status_phrase(status_code: int) -> Optional[str]:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return None


def coerce_headers(headers: Any) -> dict[str, str]:
    return {str(k): str(v) for k, v in dict(headers or {}).items()}
