from awsmodels.protocol.request import HttpMethod
from awsmodels.service import OperationModel, ServiceModel
from awsmodels.services.cloudsearchdomain.exceptions import (
    EXCEPTIONS,
    AmazonCloudSearchDomainException,
)
from awsmodels.services.cloudsearchdomain.models import SearchRequest, SearchResult

# Domains have their own endpoints (search-<domain>-<id>.<region>.cloudsearch.amazonaws.com);
# clients pass theirs as endpoint_url.
SERVICE = ServiceModel(
    name="cloudsearchdomain",
    service_name="AmazonCloudSearchDomain",
    endpoint_prefix="cloudsearchdomain",
    signing_name="cloudsearch",
    api_version="2013-01-01",
    protocol="rest-json",
    base_exception=AmazonCloudSearchDomainException,
    operations=(
        OperationModel(
            "Search",
            SearchRequest,
            SearchResult,
            http_method=HttpMethod.GET,
            request_uri="/2013-01-01/search?format=sdk&pretty=true",
        ),
    ),
    exceptions=EXCEPTIONS,
)
