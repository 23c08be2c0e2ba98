"""AWS CodeDeploy: deployment details."""

from awsmodels.services.codedeploy.exceptions import (
    AmazonCodeDeployException,
    DeploymentDoesNotExistException,
    DeploymentIdRequiredException,
    InvalidDeploymentIdException,
)
from awsmodels.services.codedeploy.models import (
    DeploymentInfo,
    DeploymentOverview,
    ErrorInformation,
    GetDeploymentRequest,
    GetDeploymentResult,
)
from awsmodels.services.codedeploy.service import SERVICE

__all__: list[str] = [
    "SERVICE",
    "AmazonCodeDeployException",
    "DeploymentDoesNotExistException",
    "DeploymentIdRequiredException",
    "DeploymentInfo",
    "DeploymentOverview",
    "ErrorInformation",
    "GetDeploymentRequest",
    "GetDeploymentResult",
    "InvalidDeploymentIdException",
]
