"""AWS Config: reporting rule evaluations."""

from awsmodels.services.config.exceptions import (
    AmazonConfigException,
    InvalidParameterValueException,
    InvalidResultTokenException,
    NoSuchConfigRuleException,
)
from awsmodels.services.config.models import (
    ComplianceType,
    Evaluation,
    PutEvaluationsRequest,
    PutEvaluationsResult,
)
from awsmodels.services.config.service import SERVICE

__all__: list[str] = [
    "SERVICE",
    "AmazonConfigException",
    "ComplianceType",
    "Evaluation",
    "InvalidParameterValueException",
    "InvalidResultTokenException",
    "NoSuchConfigRuleException",
    "PutEvaluationsRequest",
    "PutEvaluationsResult",
]
