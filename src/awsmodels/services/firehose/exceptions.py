"""Errors returned by Amazon Kinesis Firehose."""

from awsmodels.exceptions import ServiceError


class AmazonKinesisFirehoseException(ServiceError):
    """Base for Firehose errors."""


class ResourceNotFoundException(AmazonKinesisFirehoseException):
    """The delivery stream does not exist."""


class ResourceInUseException(AmazonKinesisFirehoseException):
    """The delivery stream is not in a state that allows the request."""


EXCEPTIONS = (ResourceNotFoundException, ResourceInUseException)
