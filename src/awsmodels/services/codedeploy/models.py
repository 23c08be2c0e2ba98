"""AWS CodeDeploy records."""

from datetime import datetime
from typing import Optional

from pydantic import ConfigDict

from awsmodels.model.base import AwsRequest, AwsResult, AwsShape, to_camel, to_pascal

_CAMEL_CASE = ConfigDict(alias_generator=to_camel)


class ErrorInformation(AwsShape):
    model_config = _CAMEL_CASE

    code: Optional[str] = None
    message: Optional[str] = None


class DeploymentOverview(AwsShape):
    """Instance counts by deployment state. The service sends these keys in PascalCase."""

    model_config = ConfigDict(alias_generator=to_pascal)

    pending: Optional[int] = None
    in_progress: Optional[int] = None
    succeeded: Optional[int] = None
    failed: Optional[int] = None
    skipped: Optional[int] = None


class DeploymentInfo(AwsShape):
    model_config = _CAMEL_CASE

    application_name: Optional[str] = None
    deployment_group_name: Optional[str] = None
    deployment_config_name: Optional[str] = None
    deployment_id: Optional[str] = None
    status: Optional[str] = None
    error_information: Optional[ErrorInformation] = None
    create_time: Optional[datetime] = None
    start_time: Optional[datetime] = None
    complete_time: Optional[datetime] = None
    deployment_overview: Optional[DeploymentOverview] = None
    description: Optional[str] = None
    creator: Optional[str] = None
    ignore_application_stop_failures: Optional[bool] = None


class GetDeploymentRequest(AwsRequest):
    model_config = _CAMEL_CASE

    deployment_id: Optional[str] = None


class GetDeploymentResult(AwsResult):
    model_config = _CAMEL_CASE

    deployment_info: Optional[DeploymentInfo] = None
