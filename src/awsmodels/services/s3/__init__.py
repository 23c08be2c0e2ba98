"""Amazon S3: object metadata."""

from awsmodels.services.s3.exceptions import AmazonS3Exception, NoSuchBucket, NoSuchKey
from awsmodels.services.s3.marshallers import GetObjectMetadataRequestMarshaller
from awsmodels.services.s3.models import GetObjectMetadataRequest, ObjectMetadata, SSECustomerKey
from awsmodels.services.s3.service import SERVICE

__all__: list[str] = [
    "SERVICE",
    "AmazonS3Exception",
    "GetObjectMetadataRequest",
    "GetObjectMetadataRequestMarshaller",
    "NoSuchBucket",
    "NoSuchKey",
    "ObjectMetadata",
    "SSECustomerKey",
]
