"""Errors returned by AWS Config."""

from awsmodels.exceptions import ServiceError


class AmazonConfigException(ServiceError):
    """Base for AWS Config errors."""


class InvalidParameterValueException(AmazonConfigException):
    """One or more of the specified parameters are invalid."""


class InvalidResultTokenException(AmazonConfigException):
    """The result token is invalid."""


class NoSuchConfigRuleException(AmazonConfigException):
    """The Config rule does not exist in the account."""


EXCEPTIONS = (
    InvalidParameterValueException,
    InvalidResultTokenException,
    NoSuchConfigRuleException,
)
