"""Amazon CloudSearch Domain: searching a domain."""

from awsmodels.services.cloudsearchdomain.exceptions import (
    AmazonCloudSearchDomainException,
    SearchException,
)
from awsmodels.services.cloudsearchdomain.models import (
    Bucket,
    BucketInfo,
    FieldStats,
    Hit,
    Hits,
    SearchRequest,
    SearchResult,
    SearchStatus,
)
from awsmodels.services.cloudsearchdomain.service import SERVICE

__all__: list[str] = [
    "SERVICE",
    "AmazonCloudSearchDomainException",
    "Bucket",
    "BucketInfo",
    "FieldStats",
    "Hit",
    "Hits",
    "SearchException",
    "SearchRequest",
    "SearchResult",
    "SearchStatus",
]
