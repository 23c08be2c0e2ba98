"""AWS Storage Gateway records.

Wire names keep the service's acronym casing (``VTLDeviceARNs``), so every
field declares its alias explicitly.
"""

from typing import Optional

from pydantic import Field

from awsmodels.model.base import AwsRequest, AwsResult, AwsShape


class DeviceiSCSIAttributes(AwsShape):
    """iSCSI connection details of a virtual tape library device."""

    target_arn: Optional[str] = Field(None, alias="TargetARN")
    network_interface_id: Optional[str] = Field(None, alias="NetworkInterfaceId")
    network_interface_port: Optional[int] = Field(None, alias="NetworkInterfacePort")
    chap_enabled: Optional[bool] = Field(None, alias="ChapEnabled")


class VTLDevice(AwsShape):
    """A media changer or tape drive of a tape gateway."""

    vtl_device_arn: Optional[str] = Field(None, alias="VTLDeviceARN")
    vtl_device_type: Optional[str] = Field(None, alias="VTLDeviceType")
    vtl_device_vendor: Optional[str] = Field(None, alias="VTLDeviceVendor")
    vtl_device_product_identifier: Optional[str] = Field(
        None, alias="VTLDeviceProductIdentifier"
    )
    device_iscsi_attributes: Optional[DeviceiSCSIAttributes] = Field(
        None, alias="DeviceiSCSIAttributes"
    )


class DescribeVTLDevicesRequest(AwsRequest):
    gateway_arn: Optional[str] = Field(None, alias="GatewayARN")
    vtl_device_arns: Optional[list[str]] = Field(None, alias="VTLDeviceARNs")
    marker: Optional[str] = Field(None, alias="Marker")
    limit: Optional[int] = Field(None, alias="Limit")


class DescribeVTLDevicesResult(AwsResult):
    gateway_arn: Optional[str] = Field(None, alias="GatewayARN")
    vtl_devices: Optional[list[VTLDevice]] = Field(None, alias="VTLDevices")
    marker: Optional[str] = Field(None, alias="Marker")
