from typing import Optional

from awsmodels.exceptions import MarshallingError
from awsmodels.model.base import AwsRequest
from awsmodels.protocol.request import Request
from awsmodels.protocol.rest import RestRequestMarshaller
from awsmodels.services.s3.models import SSECustomerKey

SSE_CUSTOMER_ALGORITHM = "x-amz-server-side-encryption-customer-algorithm"
SSE_CUSTOMER_KEY = "x-amz-server-side-encryption-customer-key"
SSE_CUSTOMER_KEY_MD5 = "x-amz-server-side-encryption-customer-key-MD5"


def populate_sse_customer_key_headers(request: Request, sse_key: Optional[SSECustomerKey]) -> None:
    """Add the SSE-C headers for ``sse_key``; nothing is added without a key."""
    if sse_key is None or not sse_key.key:
        return
    try:
        md5 = sse_key.key_md5()
    except ValueError as e:
        raise MarshallingError(f"SSE customer key is not valid base64: {e}") from e
    request.add_header(SSE_CUSTOMER_ALGORITHM, sse_key.algorithm or "AES256")
    request.add_header(SSE_CUSTOMER_KEY, sse_key.key)
    request.add_header(SSE_CUSTOMER_KEY_MD5, md5)


class GetObjectMetadataRequestMarshaller(RestRequestMarshaller):
    """REST marshalling plus the SSE-C headers of the request's customer key."""

    def _marshall_into(self, request: Request, request_obj: AwsRequest) -> None:
        super()._marshall_into(request, request_obj)
        populate_sse_customer_key_headers(request, request_obj.sse_customer_key)
