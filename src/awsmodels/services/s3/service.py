from awsmodels.protocol.request import HttpMethod
from awsmodels.service import OperationModel, ServiceModel
from awsmodels.services.s3.exceptions import EXCEPTIONS, AmazonS3Exception
from awsmodels.services.s3.marshallers import GetObjectMetadataRequestMarshaller
from awsmodels.services.s3.models import GetObjectMetadataRequest, ObjectMetadata

# Path-style addressing: the bucket is the first path segment.
SERVICE = ServiceModel(
    name="s3",
    service_name="Amazon S3",
    endpoint_prefix="s3",
    signing_name="s3",
    api_version="2006-03-01",
    protocol="rest-xml",
    signature_version="s3v4",
    base_exception=AmazonS3Exception,
    operations=(
        OperationModel(
            "GetObjectMetadata",
            GetObjectMetadataRequest,
            ObjectMetadata,
            http_method=HttpMethod.HEAD,
            request_uri="/{Bucket}/{Key+}",
            marshaller_class=GetObjectMetadataRequestMarshaller,
        ),
    ),
    exceptions=EXCEPTIONS,
)
