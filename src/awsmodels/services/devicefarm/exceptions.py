"""Errors returned by AWS Device Farm."""

from awsmodels.exceptions import ServiceError


class AWSDeviceFarmException(ServiceError):
    """Base for Device Farm errors."""


class ArgumentException(AWSDeviceFarmException):
    """An invalid argument was specified."""


class NotFoundException(AWSDeviceFarmException):
    """The specified entity was not found."""


class LimitExceededException(AWSDeviceFarmException):
    """A limit was exceeded."""


class IdempotencyException(AWSDeviceFarmException):
    """An entity with the same name already exists."""


class ServiceAccountException(AWSDeviceFarmException):
    """There was a problem with the service account."""


EXCEPTIONS = (
    ArgumentException,
    NotFoundException,
    LimitExceededException,
    IdempotencyException,
    ServiceAccountException,
)
