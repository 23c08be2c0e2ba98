"""Errors returned by Amazon CloudSearch Domain."""

from awsmodels.exceptions import ServiceError


class AmazonCloudSearchDomainException(ServiceError):
    """Base for CloudSearch Domain errors."""


class SearchException(AmazonCloudSearchDomainException):
    """The search request could not be processed, usually because of invalid syntax."""


EXCEPTIONS = (SearchException,)
