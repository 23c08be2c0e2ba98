"""Errors returned by AWS CodePipeline."""

from awsmodels.exceptions import ServiceError


class AWSCodePipelineException(ServiceError):
    """Base for CodePipeline errors."""


class LimitExceededException(AWSCodePipelineException):
    """The number of pipelines associated with the account has exceeded the limit."""


class PipelineNotFoundException(AWSCodePipelineException):
    """The pipeline was specified in an invalid format or cannot be found."""


class InvalidNextTokenException(AWSCodePipelineException):
    """The next token was specified in an invalid format."""


class ValidationException(AWSCodePipelineException):
    """The validation was specified in an invalid format."""


EXCEPTIONS = (
    LimitExceededException,
    PipelineNotFoundException,
    InvalidNextTokenException,
    ValidationException,
)
