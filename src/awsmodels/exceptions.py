"""Exception hierarchy shared by every service model.

Client-side failures (bad arguments, transcoding errors, transport problems)
derive from :class:`SdkClientError`. Errors reported by a service derive from
:class:`ServiceError`; each service declares one subclass per documented
error code.
"""

from typing import Any, Iterable, Optional

from botocore.exceptions import ClientError


class SdkError(Exception):
    """Base class for every error raised by awsmodels."""


class SdkClientError(SdkError):
    """Raised when a request cannot be built, sent, or its response read."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class MarshallingError(SdkClientError):
    """Raised when a request object cannot be converted to its wire form."""


class UnmarshallingError(SdkClientError):
    """Raised when a response cannot be converted into a model object."""


class ServiceError(SdkError):
    """
    Error returned by an AWS service.

    Subclasses set ``error_code`` when the wire code differs from the class
    name (for example RDS faults).
    """

    error_code: Optional[str] = None

    ERROR_TYPE_CLIENT = "Client"
    ERROR_TYPE_SERVICE = "Service"
    ERROR_TYPE_UNKNOWN = "Unknown"

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        error_code: Optional[str] = None,
        status_code: Optional[int] = None,
        request_id: Optional[str] = None,
        service_name: Optional[str] = None,
        error_type: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.error_message = message
        if error_code is not None:
            self.error_code = error_code
        elif self.error_code is None:
            self.error_code = type(self).__name__
        self.status_code = status_code
        self.request_id = request_id
        self.service_name = service_name
        self.error_type = error_type or self._error_type_for(status_code)

    @staticmethod
    def _error_type_for(status_code: Optional[int]) -> str:
        if status_code is None:
            return ServiceError.ERROR_TYPE_UNKNOWN
        if status_code >= 500:
            return ServiceError.ERROR_TYPE_SERVICE
        return ServiceError.ERROR_TYPE_CLIENT

    @classmethod
    def wire_code(cls) -> str:
        """Error code this class is registered under."""
        return cls.error_code or cls.__name__

    @classmethod
    def from_client_error(
        cls,
        error: ClientError,
        exception_classes: Iterable[type["ServiceError"]] = (),
        service_name: Optional[str] = None,
    ) -> "ServiceError":
        """
        Convert a botocore ClientError into a typed service error.

        Args:
            error: The botocore error raised by a boto3 client call
            exception_classes: Candidate classes, matched on their wire code
            service_name: Service name recorded on the new exception

        Returns:
            An instance of the matching class, or of ``cls`` when no class matches
        """
        response = error.response or {}
        err = response.get("Error", {})
        metadata = response.get("ResponseMetadata", {})
        code = err.get("Code")
        target = cls
        for candidate in exception_classes:
            if candidate.wire_code() == code:
                target = candidate
                break
        translated = target(
            err.get("Message"),
            error_code=code,
            status_code=metadata.get("HTTPStatusCode"),
            request_id=metadata.get("RequestId"),
            service_name=service_name,
        )
        translated.__cause__ = error
        return translated

    def __str__(self) -> str:
        parts = [str(self.error_message)]
        details = [f"Service: {self.service_name}"] if self.service_name else []
        if self.status_code is not None:
            details.append(f"Status Code: {self.status_code}")
        details.append(f"Error Code: {self.error_code}")
        if self.request_id:
            details.append(f"Request ID: {self.request_id}")
        parts.append("(" + "; ".join(details) + ")")
        return " ".join(parts)
