"""AWS Config records."""

from datetime import datetime
from enum import Enum
from typing import Optional, Union

from pydantic import ConfigDict, Field

from awsmodels.model.base import AwsRequest, AwsResult, AwsShape, to_pascal

_PASCAL_CASE = ConfigDict(alias_generator=to_pascal)


class ComplianceType(str, Enum):
    COMPLIANT = "COMPLIANT"
    NON_COMPLIANT = "NON_COMPLIANT"
    NOT_APPLICABLE = "NOT_APPLICABLE"
    INSUFFICIENT_DATA = "INSUFFICIENT_DATA"


class Evaluation(AwsShape):
    """
    Result of evaluating one resource against a Config rule.

    ``ordering_timestamp`` is the time of the event that triggered the
    evaluation; ``annotation`` explains the compliance outcome.
    """

    model_config = _PASCAL_CASE

    compliance_resource_type: Optional[str] = None
    compliance_resource_id: Optional[str] = None
    # values added by the service later stay plain strings
    compliance_type: Optional[Union[ComplianceType, str]] = Field(None, union_mode="left_to_right")
    annotation: Optional[str] = None
    ordering_timestamp: Optional[datetime] = None


class PutEvaluationsRequest(AwsRequest):
    model_config = _PASCAL_CASE

    evaluations: Optional[list[Evaluation]] = None
    result_token: Optional[str] = None


class PutEvaluationsResult(AwsResult):
    model_config = _PASCAL_CASE

    failed_evaluations: Optional[list[Evaluation]] = None
