"""Errors raised by the DynamoDB mapper."""

from awsmodels.exceptions import SdkClientError, ServiceError


class DynamoDBMappingError(SdkClientError):
    """A class or object cannot be mapped onto a DynamoDB item."""


class AmazonDynamoDBException(ServiceError):
    """Base for DynamoDB errors surfaced by the mapper."""


class ConditionalCheckFailedException(AmazonDynamoDBException):
    """A conditional write failed, typically because the item's version changed."""


EXCEPTIONS = (ConditionalCheckFailedException,)
