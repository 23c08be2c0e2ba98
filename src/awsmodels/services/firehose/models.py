"""Amazon Kinesis Firehose records."""

from datetime import datetime
from enum import Enum
from typing import Optional, Union

from pydantic import ConfigDict, Field

from awsmodels.model.base import AwsRequest, AwsResult, AwsShape, to_pascal

_PASCAL_CASE = ConfigDict(alias_generator=to_pascal)


class DeliveryStreamStatus(str, Enum):
    CREATING = "CREATING"
    DELETING = "DELETING"
    ACTIVE = "ACTIVE"


class BufferingHints(AwsShape):
    model_config = _PASCAL_CASE

    size_in_mbs: Optional[int] = Field(None, alias="SizeInMBs")
    interval_in_seconds: Optional[int] = None


class S3DestinationDescription(AwsShape):
    model_config = _PASCAL_CASE

    role_arn: Optional[str] = Field(None, alias="RoleARN")
    bucket_arn: Optional[str] = Field(None, alias="BucketARN")
    prefix: Optional[str] = None
    buffering_hints: Optional[BufferingHints] = None
    compression_format: Optional[str] = None


class DestinationDescription(AwsShape):
    model_config = _PASCAL_CASE

    destination_id: Optional[str] = None
    s3_destination_description: Optional[S3DestinationDescription] = Field(
        None, alias="S3DestinationDescription"
    )


class DeliveryStreamDescription(AwsShape):
    """
    State of a delivery stream.

    ``has_more_destinations`` is set when ``destinations`` was truncated by the
    request's ``limit``; continue with ``exclusive_start_destination_id``.
    """

    model_config = _PASCAL_CASE

    delivery_stream_name: Optional[str] = None
    delivery_stream_arn: Optional[str] = Field(None, alias="DeliveryStreamARN")
    delivery_stream_status: Optional[Union[DeliveryStreamStatus, str]] = Field(None, union_mode="left_to_right")
    version_id: Optional[str] = None
    create_timestamp: Optional[datetime] = None
    last_update_timestamp: Optional[datetime] = None
    destinations: Optional[list[DestinationDescription]] = None
    has_more_destinations: Optional[bool] = None


class DescribeDeliveryStreamRequest(AwsRequest):
    model_config = _PASCAL_CASE

    delivery_stream_name: Optional[str] = None
    limit: Optional[int] = None
    exclusive_start_destination_id: Optional[str] = None


class DescribeDeliveryStreamResult(AwsResult):
    model_config = _PASCAL_CASE

    delivery_stream_description: Optional[DeliveryStreamDescription] = None
