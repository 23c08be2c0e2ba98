"""Amazon S3 records for reading object metadata."""

import base64
import hashlib
from datetime import datetime
from typing import Annotated, Optional

from pydantic import Field

from awsmodels.model.base import AwsRequest, AwsResult, AwsShape, HttpBinding


class SSECustomerKey(AwsShape):
    """
    A customer-provided encryption key (SSE-C).

    ``key`` is the base64-encoded 256-bit key. ``md5`` is derived from the key
    when not given.
    """

    key: Optional[str] = Field(None, alias="Key")
    algorithm: Optional[str] = Field("AES256", alias="Algorithm")
    md5: Optional[str] = Field(None, alias="MD5")

    @classmethod
    def from_bytes(cls, raw_key: bytes) -> "SSECustomerKey":
        return cls(key=base64.b64encode(raw_key).decode("ascii"))

    def key_md5(self) -> Optional[str]:
        if self.md5:
            return self.md5
        if not self.key:
            return None
        digest = hashlib.md5(base64.b64decode(self.key)).digest()
        return base64.b64encode(digest).decode("ascii")


class GetObjectMetadataRequest(AwsRequest):
    """Reads an object's metadata without its content (``HEAD /{Bucket}/{Key+}``)."""

    bucket_name: Annotated[Optional[str], HttpBinding.uri("Bucket")] = Field(None, alias="Bucket")
    key: Annotated[Optional[str], HttpBinding.uri("Key")] = Field(None, alias="Key")
    version_id: Annotated[Optional[str], HttpBinding.querystring("versionId")] = Field(
        None, alias="VersionId"
    )
    sse_customer_key: Optional[SSECustomerKey] = Field(None, alias="SSECustomerKey")


class ObjectMetadata(AwsResult):
    """System metadata from response headers and user metadata from ``x-amz-meta-*``."""

    content_length: Annotated[Optional[int], HttpBinding.header("Content-Length")] = Field(
        None, alias="ContentLength"
    )
    content_type: Annotated[Optional[str], HttpBinding.header("Content-Type")] = Field(
        None, alias="ContentType"
    )
    content_encoding: Annotated[Optional[str], HttpBinding.header("Content-Encoding")] = Field(
        None, alias="ContentEncoding"
    )
    content_disposition: Annotated[
        Optional[str], HttpBinding.header("Content-Disposition")
    ] = Field(None, alias="ContentDisposition")
    cache_control: Annotated[Optional[str], HttpBinding.header("Cache-Control")] = Field(
        None, alias="CacheControl"
    )
    etag: Annotated[Optional[str], HttpBinding.header("ETag")] = Field(None, alias="ETag")
    last_modified: Annotated[Optional[datetime], HttpBinding.header("Last-Modified")] = Field(
        None, alias="LastModified"
    )
    version_id: Annotated[Optional[str], HttpBinding.header("x-amz-version-id")] = Field(
        None, alias="VersionId"
    )
    delete_marker: Annotated[Optional[bool], HttpBinding.header("x-amz-delete-marker")] = Field(
        None, alias="DeleteMarker"
    )
    server_side_encryption: Annotated[
        Optional[str], HttpBinding.header("x-amz-server-side-encryption")
    ] = Field(None, alias="ServerSideEncryption")
    sse_customer_algorithm: Annotated[
        Optional[str], HttpBinding.header("x-amz-server-side-encryption-customer-algorithm")
    ] = Field(None, alias="SSECustomerAlgorithm")
    sse_customer_key_md5: Annotated[
        Optional[str], HttpBinding.header("x-amz-server-side-encryption-customer-key-MD5")
    ] = Field(None, alias="SSECustomerKeyMD5")
    user_metadata: Annotated[
        Optional[dict[str, str]], HttpBinding.header_prefix("x-amz-meta-")
    ] = Field(None, alias="Metadata")
