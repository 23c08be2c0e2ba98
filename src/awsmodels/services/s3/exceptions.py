"""Errors returned by Amazon S3."""

from awsmodels.exceptions import ServiceError


class AmazonS3Exception(ServiceError):
    """
    Base for S3 errors.

    ``HEAD`` responses carry no body, so their errors arrive with the HTTP
    status as code (``404``, ``403``) rather than ``NoSuchKey``.
    """


class NoSuchBucket(AmazonS3Exception):
    """The specified bucket does not exist."""


class NoSuchKey(AmazonS3Exception):
    """The specified key does not exist."""


EXCEPTIONS = (NoSuchBucket, NoSuchKey)
