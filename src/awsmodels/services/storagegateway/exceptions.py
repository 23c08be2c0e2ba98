"""Errors returned by AWS Storage Gateway."""

from awsmodels.exceptions import ServiceError


class AWSStorageGatewayException(ServiceError):
    """Base for Storage Gateway errors."""


class InvalidGatewayRequestException(AWSStorageGatewayException):
    """The request was invalid, for example a gateway that is not a tape gateway."""


class InternalServerError(AWSStorageGatewayException):
    """The gateway failed to process the request."""


EXCEPTIONS = (InvalidGatewayRequestException, InternalServerError)
