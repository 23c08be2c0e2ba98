"""Errors returned by Amazon ECS."""

from awsmodels.exceptions import ServiceError


class AmazonECSException(ServiceError):
    """Base for ECS errors."""


class ClientException(AmazonECSException):
    """The request used an action or resource the caller cannot use."""


class ServerException(AmazonECSException):
    """The service failed to process the request."""


class InvalidParameterException(AmazonECSException):
    """A parameter is invalid."""


EXCEPTIONS = (ClientException, ServerException, InvalidParameterException)
