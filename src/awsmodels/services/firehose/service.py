from awsmodels.service import OperationModel, ServiceModel
from awsmodels.services.firehose.exceptions import EXCEPTIONS, AmazonKinesisFirehoseException
from awsmodels.services.firehose.models import (
    DescribeDeliveryStreamRequest,
    DescribeDeliveryStreamResult,
)

SERVICE = ServiceModel(
    name="firehose",
    service_name="AmazonKinesisFirehose",
    endpoint_prefix="firehose",
    signing_name="firehose",
    api_version="2015-08-04",
    protocol="json",
    target_prefix="Firehose_20150804",
    base_exception=AmazonKinesisFirehoseException,
    operations=(
        OperationModel(
            "DescribeDeliveryStream",
            DescribeDeliveryStreamRequest,
            DescribeDeliveryStreamResult,
        ),
    ),
    exceptions=EXCEPTIONS,
)
