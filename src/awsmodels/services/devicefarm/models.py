"""AWS Device Farm records."""

from datetime import datetime
from typing import Optional

from pydantic import ConfigDict

from awsmodels.model.base import AwsRequest, AwsResult, AwsShape, to_camel

_CAMEL_CASE = ConfigDict(alias_generator=to_camel)


class Radios(AwsShape):
    """Radio states of a device during a run. All radios are on unless disabled."""

    model_config = _CAMEL_CASE

    wifi: Optional[bool] = None
    bluetooth: Optional[bool] = None
    nfc: Optional[bool] = None
    gps: Optional[bool] = None


class Location(AwsShape):
    model_config = _CAMEL_CASE

    latitude: Optional[float] = None
    longitude: Optional[float] = None


class Counters(AwsShape):
    model_config = _CAMEL_CASE

    total: Optional[int] = None
    passed: Optional[int] = None
    failed: Optional[int] = None
    warned: Optional[int] = None
    errored: Optional[int] = None
    stopped: Optional[int] = None
    skipped: Optional[int] = None


class Run(AwsShape):
    """A test run of an app on a device pool."""

    model_config = _CAMEL_CASE

    arn: Optional[str] = None
    name: Optional[str] = None
    type: Optional[str] = None
    platform: Optional[str] = None
    created: Optional[datetime] = None
    status: Optional[str] = None
    result: Optional[str] = None
    started: Optional[datetime] = None
    stopped: Optional[datetime] = None
    counters: Optional[Counters] = None
    message: Optional[str] = None
    total_jobs: Optional[int] = None
    completed_jobs: Optional[int] = None
    billing_method: Optional[str] = None


class ScheduleRunTest(AwsShape):
    model_config = _CAMEL_CASE

    type: Optional[str] = None
    test_package_arn: Optional[str] = None
    filter: Optional[str] = None
    parameters: Optional[dict[str, str]] = None


class ScheduleRunConfiguration(AwsShape):
    model_config = _CAMEL_CASE

    extra_data_package_arn: Optional[str] = None
    network_profile_arn: Optional[str] = None
    locale: Optional[str] = None
    location: Optional[Location] = None
    radios: Optional[Radios] = None
    auxiliary_apps: Optional[list[str]] = None
    billing_method: Optional[str] = None


class GetRunRequest(AwsRequest):
    model_config = _CAMEL_CASE

    arn: Optional[str] = None


class GetRunResult(AwsResult):
    model_config = _CAMEL_CASE

    run: Optional[Run] = None


class ScheduleRunRequest(AwsRequest):
    model_config = _CAMEL_CASE

    project_arn: Optional[str] = None
    app_arn: Optional[str] = None
    device_pool_arn: Optional[str] = None
    name: Optional[str] = None
    test: Optional[ScheduleRunTest] = None
    configuration: Optional[ScheduleRunConfiguration] = None


class ScheduleRunResult(AwsResult):
    model_config = _CAMEL_CASE

    run: Optional[Run] = None
