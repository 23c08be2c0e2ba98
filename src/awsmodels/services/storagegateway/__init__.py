"""AWS Storage Gateway: virtual tape library devices."""

from awsmodels.services.storagegateway.exceptions import (
    AWSStorageGatewayException,
    InternalServerError,
    InvalidGatewayRequestException,
)
from awsmodels.services.storagegateway.models import (
    DescribeVTLDevicesRequest,
    DescribeVTLDevicesResult,
    DeviceiSCSIAttributes,
    VTLDevice,
)
from awsmodels.services.storagegateway.service import SERVICE

__all__: list[str] = [
    "SERVICE",
    "AWSStorageGatewayException",
    "DescribeVTLDevicesRequest",
    "DescribeVTLDevicesResult",
    "DeviceiSCSIAttributes",
    "InternalServerError",
    "InvalidGatewayRequestException",
    "VTLDevice",
]
