"""Errors returned by AWS CodeDeploy."""

from awsmodels.exceptions import ServiceError


class AmazonCodeDeployException(ServiceError):
    """Base for CodeDeploy errors."""


class DeploymentDoesNotExistException(AmazonCodeDeployException):
    """The deployment does not exist for the account."""


class DeploymentIdRequiredException(AmazonCodeDeployException):
    """At least one deployment ID must be specified."""


class InvalidDeploymentIdException(AmazonCodeDeployException):
    """The deployment ID was specified in an invalid format."""


EXCEPTIONS = (
    DeploymentDoesNotExistException,
    DeploymentIdRequiredException,
    InvalidDeploymentIdException,
)
