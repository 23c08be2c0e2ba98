from awsmodels.service import OperationModel, ServiceModel
from awsmodels.services.devicefarm.exceptions import EXCEPTIONS, AWSDeviceFarmException
from awsmodels.services.devicefarm.models import (
    GetRunRequest,
    GetRunResult,
    ScheduleRunRequest,
    ScheduleRunResult,
)

SERVICE = ServiceModel(
    name="devicefarm",
    service_name="AWSDeviceFarm",
    endpoint_prefix="devicefarm",
    signing_name="devicefarm",
    api_version="2015-06-23",
    protocol="json",
    target_prefix="DeviceFarm_20150623",
    base_exception=AWSDeviceFarmException,
    operations=(
        OperationModel("GetRun", GetRunRequest, GetRunResult),
        OperationModel("ScheduleRun", ScheduleRunRequest, ScheduleRunResult),
    ),
    exceptions=EXCEPTIONS,
)
