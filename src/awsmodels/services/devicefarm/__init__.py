"""AWS Device Farm: scheduling and inspecting test runs."""

from awsmodels.services.devicefarm.exceptions import (
    ArgumentException,
    AWSDeviceFarmException,
    IdempotencyException,
    LimitExceededException,
    NotFoundException,
    ServiceAccountException,
)
from awsmodels.services.devicefarm.models import (
    Counters,
    GetRunRequest,
    GetRunResult,
    Location,
    Radios,
    Run,
    ScheduleRunConfiguration,
    ScheduleRunRequest,
    ScheduleRunResult,
    ScheduleRunTest,
)
from awsmodels.services.devicefarm.service import SERVICE

__all__: list[str] = [
    "SERVICE",
    "AWSDeviceFarmException",
    "ArgumentException",
    "Counters",
    "GetRunRequest",
    "GetRunResult",
    "IdempotencyException",
    "LimitExceededException",
    "Location",
    "NotFoundException",
    "Radios",
    "Run",
    "ScheduleRunConfiguration",
    "ScheduleRunRequest",
    "ScheduleRunResult",
    "ScheduleRunTest",
    "ServiceAccountException",
]
