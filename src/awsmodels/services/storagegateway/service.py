from awsmodels.service import OperationModel, ServiceModel
from awsmodels.services.storagegateway.exceptions import EXCEPTIONS, AWSStorageGatewayException
from awsmodels.services.storagegateway.models import (
    DescribeVTLDevicesRequest,
    DescribeVTLDevicesResult,
)

SERVICE = ServiceModel(
    name="storagegateway",
    service_name="AWSStorageGateway",
    endpoint_prefix="storagegateway",
    signing_name="storagegateway",
    api_version="2013-06-30",
    protocol="json",
    target_prefix="StorageGateway_20130630",
    base_exception=AWSStorageGatewayException,
    operations=(
        OperationModel("DescribeVTLDevices", DescribeVTLDevicesRequest, DescribeVTLDevicesResult),
    ),
    exceptions=EXCEPTIONS,
)
