"""Amazon Kinesis Firehose: delivery stream descriptions."""

from awsmodels.services.firehose.exceptions import (
    AmazonKinesisFirehoseException,
    ResourceInUseException,
    ResourceNotFoundException,
)
from awsmodels.services.firehose.models import (
    BufferingHints,
    DeliveryStreamDescription,
    DeliveryStreamStatus,
    DescribeDeliveryStreamRequest,
    DescribeDeliveryStreamResult,
    DestinationDescription,
    S3DestinationDescription,
)
from awsmodels.services.firehose.service import SERVICE

__all__: list[str] = [
    "SERVICE",
    "AmazonKinesisFirehoseException",
    "BufferingHints",
    "DeliveryStreamDescription",
    "DeliveryStreamStatus",
    "DescribeDeliveryStreamRequest",
    "DescribeDeliveryStreamResult",
    "DestinationDescription",
    "ResourceInUseException",
    "ResourceNotFoundException",
    "S3DestinationDescription",
]
